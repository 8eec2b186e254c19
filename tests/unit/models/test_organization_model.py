# Licensed under the MIT license.

import datetime as dt

import pytest

from workos_sdk.core.pagination import PaginationOrder, PaginationParams
from workos_sdk.models.organization import (
    CreateOrganizationParams,
    ListOrganizationsParams,
    Organization,
    UpdateOrganizationParams,
)


class TestOrganizationDecoding:
    def test_decodes_full_object(self, organization_body):
        org = Organization.from_api_response(organization_body)
        assert org.id == "org_01EHZNVPK3SFK441A1RGBFSHRT"
        assert org.name == "Foo Corp"
        assert org.allow_profiles_outside_organization is False
        assert [d.domain for d in org.domains] == ["foo-corp.com"]
        assert org.domains[0].id == "org_domain_01EHZNVPK2QXHMVWCEDQEKY69A"
        assert org.timestamps.created_at == dt.datetime(2021, 6, 25, 19, 7, 33, 155000, tzinfo=dt.timezone.utc)

    def test_missing_name_raises_key_error(self, organization_body):
        del organization_body["name"]
        with pytest.raises(KeyError):
            Organization.from_api_response(organization_body)

    def test_wrong_type_raises_type_error(self, organization_body):
        organization_body["allow_profiles_outside_organization"] = "no"
        with pytest.raises(TypeError):
            Organization.from_api_response(organization_body)

    def test_domains_must_be_a_list(self, organization_body):
        organization_body["domains"] = "foo-corp.com"
        with pytest.raises(TypeError):
            Organization.from_api_response(organization_body)

    def test_extra_fields_are_ignored(self, organization_body):
        organization_body["metadata"] = {"tier": "gold"}
        assert Organization.from_api_response(organization_body).name == "Foo Corp"


class TestOrganizationParams:
    def test_list_query_defaults(self):
        assert ListOrganizationsParams().to_query() == {"order": "desc"}

    def test_list_query_with_domains(self):
        params = ListOrganizationsParams(
            pagination=PaginationParams(order=PaginationOrder.ASC, limit=5),
            domains=["foo-corp.com", "bar.com"],
        )
        assert params.to_query() == {"order": "asc", "limit": "5", "domains[]": "foo-corp.com,bar.com"}

    def test_create_body(self):
        body = CreateOrganizationParams(name="Foo Corp", domains=["foo-corp.com"]).to_body()
        assert body == {"name": "Foo Corp", "domains": ["foo-corp.com"]}

    def test_create_body_with_profile_policy(self):
        body = CreateOrganizationParams(name="Foo", allow_profiles_outside_organization=True).to_body()
        assert body == {"name": "Foo", "domains": [], "allow_profiles_outside_organization": True}

    def test_update_body_omits_unset_fields_and_id(self):
        body = UpdateOrganizationParams("org_1", name="Renamed").to_body()
        assert body == {"name": "Renamed"}
