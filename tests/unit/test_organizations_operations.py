# Licensed under the MIT license.

from workos_sdk.core.pagination import PaginationParams, iter_all, iter_pages
from workos_sdk.core.results import Ok, TransportError, Unauthorized
from workos_sdk.models.organization import (
    CreateOrganizationParams,
    ListOrganizationsParams,
    Organization,
    UpdateOrganizationParams,
)

from conftest import BASE_URL


def _page(bodies, after=None, before=None):
    return {"data": bodies, "list_metadata": {"before": before, "after": after}}


class TestListOrganizations:
    def test_page_and_cursor(self, client, fake_http, organization_body):
        second = dict(organization_body, id="org_B", name="Bar Corp")
        fake_http.queue(200, _page([organization_body, second], after="org_B"))

        result = client.organizations.list_organizations(ListOrganizationsParams(domains=["foo-corp.com"]))

        assert isinstance(result, Ok)
        page = result.value
        assert len(page) == 2
        assert page[1].name == "Bar Corp"
        assert page.list_metadata.after == "org_B"
        assert page.has_more
        call = fake_http.last
        assert call["method"] == "get"
        assert call["url"] == f"{BASE_URL}/organizations"
        assert call["params"] == {"order": "desc", "domains[]": "foo-corp.com"}

    def test_next_page_params(self, client, fake_http, organization_body):
        fake_http.queue(200, _page([organization_body], after="org_B"))
        params = ListOrganizationsParams(pagination=PaginationParams(limit=1))
        page = client.organizations.list_organizations(params).unwrap()
        next_params = page.next_page_params(params)
        assert next_params.pagination.after == "org_B"
        assert next_params.pagination.limit == 1

    def test_iter_pages_stops_on_last_page(self, client, fake_http, organization_body):
        fake_http.queue(200, _page([organization_body], after="org_B"))
        fake_http.queue(200, _page([dict(organization_body, id="org_B")], before="org_B"))

        pages = list(iter_pages(client.organizations.list_organizations, ListOrganizationsParams()))

        assert len(pages) == 2
        assert len(fake_http.calls) == 2
        assert fake_http.calls[1]["params"]["after"] == "org_B"

    def test_iter_all_yields_every_item(self, client, fake_http, organization_body):
        fake_http.queue(200, _page([organization_body], after="org_B"))
        fake_http.queue(200, _page([dict(organization_body, id="org_B")]))
        ids = [org.id for org in iter_all(client.organizations.list_organizations, ListOrganizationsParams())]
        assert ids == ["org_01EHZNVPK3SFK441A1RGBFSHRT", "org_B"]

    def test_iter_pages_stops_after_failure(self, client, fake_http):
        fake_http.queue(500, "oops")
        pages = list(iter_pages(client.organizations.list_organizations, ListOrganizationsParams()))
        assert len(pages) == 1
        assert isinstance(pages[0], TransportError)

    def test_missing_list_metadata_is_transport_error(self, client, fake_http, organization_body):
        fake_http.queue(200, {"data": [organization_body]})
        assert isinstance(client.organizations.list_organizations(), TransportError)


class TestOrganizationCrud:
    def test_get(self, client, fake_http, organization_body):
        fake_http.queue(200, organization_body)
        result = client.organizations.get_organization("org_01EHZNVPK3SFK441A1RGBFSHRT")
        assert isinstance(result.unwrap(), Organization)
        assert fake_http.last["url"] == f"{BASE_URL}/organizations/org_01EHZNVPK3SFK441A1RGBFSHRT"

    def test_create(self, client, fake_http, organization_body):
        fake_http.queue(201, organization_body)
        result = client.organizations.create_organization(
            CreateOrganizationParams(name="Foo Corp", domains=["foo-corp.com"])
        )
        assert result.is_ok
        assert fake_http.last["method"] == "post"
        assert fake_http.last["json"] == {"name": "Foo Corp", "domains": ["foo-corp.com"]}

    def test_update(self, client, fake_http, organization_body):
        fake_http.queue(200, organization_body)
        client.organizations.update_organization(UpdateOrganizationParams("org_1", name="Foo Corp"))
        assert fake_http.last["method"] == "put"
        assert fake_http.last["url"] == f"{BASE_URL}/organizations/org_1"
        assert fake_http.last["json"] == {"name": "Foo Corp"}

    def test_delete(self, client, fake_http):
        fake_http.queue(202)
        assert client.organizations.delete_organization("org_1") == Ok(None)
        assert fake_http.last["method"] == "delete"

    def test_unauthorized(self, client, fake_http):
        fake_http.queue(401, {"message": "Unauthorized"})
        assert client.organizations.get_organization("org_1") == Unauthorized()

    def test_not_found_is_transport_error(self, client, fake_http):
        fake_http.queue(404, {"message": "Not Found"})
        result = client.organizations.get_organization("org_missing")
        assert isinstance(result, TransportError)
        assert result.status_code == 404
        assert "Not Found" in result.body
