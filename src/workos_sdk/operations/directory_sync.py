# Licensed under the MIT license.

"""Directory Sync operations namespace."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from ..core.pagination import PaginatedList
from ..core.results import NoError, WorkOSResult
from ..core.types import DirectoryGroupId, DirectoryId, DirectoryUserId
from ..models.directory_sync import (
    Directory,
    DirectoryGroup,
    DirectoryUser,
    ListDirectoriesParams,
    ListDirectoryGroupsParams,
    ListDirectoryUsersParams,
)

if TYPE_CHECKING:
    from ..client import WorkOSClient


class DirectorySyncOperations:
    """
    Directory Sync operations: directories and the users and groups they provision.

    Accessed via ``client.directory_sync``.

    Example::

        users = client.directory_sync.list_directory_users(
            ListDirectoryUsersParams(filter=DirectoryUsersFilter.directory("directory_123"))
        ).unwrap()
        for user in users:
            email = user.primary_email()
            print(user.id, email.value if email else None)
    """

    def __init__(self, client: "WorkOSClient") -> None:
        self._client = client

    # ------------------------------------------------------------ directories

    def list_directories(
        self, params: Optional[ListDirectoriesParams] = None
    ) -> WorkOSResult[PaginatedList[Directory], NoError]:
        """
        List directories.

        :param params: Filters and cursors.
        :type params: ~workos_sdk.models.directory_sync.ListDirectoriesParams | None
        :rtype: WorkOSResult[PaginatedList[Directory], NoError]
        """
        params = params or ListDirectoriesParams()
        return self._client._get_api()._call(
            "get",
            ("directories",),
            params=params.to_query(),
            decode=lambda body: PaginatedList.from_api_response(body, Directory.from_api_response),
        )

    def get_directory(self, directory_id: DirectoryId) -> WorkOSResult[Directory, NoError]:
        return self._client._get_api()._call(
            "get", ("directories", directory_id), decode=Directory.from_api_response
        )

    def delete_directory(self, directory_id: DirectoryId) -> WorkOSResult[None, NoError]:
        return self._client._get_api()._call("delete", ("directories", directory_id), decode=None)

    # ------------------------------------------------------- directory users

    def list_directory_users(
        self, params: ListDirectoryUsersParams
    ) -> WorkOSResult[PaginatedList[DirectoryUser], NoError]:
        """
        List the users of a directory or of a directory group.

        :param params: Directory or group filter, and cursors.
        :type params: ~workos_sdk.models.directory_sync.ListDirectoryUsersParams
        :rtype: WorkOSResult[PaginatedList[DirectoryUser], NoError]
        """
        return self._client._get_api()._call(
            "get",
            ("directory_users",),
            params=params.to_query(),
            decode=lambda body: PaginatedList.from_api_response(body, DirectoryUser.from_api_response),
        )

    def get_directory_user(self, directory_user_id: DirectoryUserId) -> WorkOSResult[DirectoryUser, NoError]:
        return self._client._get_api()._call(
            "get", ("directory_users", directory_user_id), decode=DirectoryUser.from_api_response
        )

    # ------------------------------------------------------ directory groups

    def list_directory_groups(
        self, params: ListDirectoryGroupsParams
    ) -> WorkOSResult[PaginatedList[DirectoryGroup], NoError]:
        """
        List the groups of a directory, or the groups a directory user belongs to.

        :param params: Directory or user filter, and cursors.
        :type params: ~workos_sdk.models.directory_sync.ListDirectoryGroupsParams
        :rtype: WorkOSResult[PaginatedList[DirectoryGroup], NoError]
        """
        return self._client._get_api()._call(
            "get",
            ("directory_groups",),
            params=params.to_query(),
            decode=lambda body: PaginatedList.from_api_response(body, DirectoryGroup.from_api_response),
        )

    def get_directory_group(self, directory_group_id: DirectoryGroupId) -> WorkOSResult[DirectoryGroup, NoError]:
        return self._client._get_api()._call(
            "get", ("directory_groups", directory_group_id), decode=DirectoryGroup.from_api_response
        )
