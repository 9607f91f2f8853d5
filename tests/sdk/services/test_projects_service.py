from pathlib import Path

import pytest
from pytest_httpx import HTTPXMock

from gitlab_sdk import (
    AccessLevel,
    GitLab,
    GitLabAPIError,
    ProjectOrder,
    ProjectVisibility,
)
from gitlab_sdk.models import Project, UploadedFile

PROJECT = {
    "id": 4,
    "name": "Diaspora Client",
    "description": None,
    "path_with_namespace": "diaspora/diaspora-client",
    "default_branch": "main",
    "visibility": "private",
    "star_count": 0,
    "forks_count": 0,
    "archived": False,
    "last_activity_at": "2013-09-30T13:46:02Z",
}

UPLOAD = {
    "alt": "logo",
    "url": "/uploads/66dbcd21ec5d24ed6ea225176098d52b/logo.png",
    "full_path": "/diaspora/diaspora-client/uploads/66dbcd21ec5d24ed6ea225176098d52b/logo.png",
    "markdown": "![logo](/uploads/66dbcd21ec5d24ed6ea225176098d52b/logo.png)",
}


class TestProjectsService:
    class TestList:
        def test_list(self, httpx_mock: HTTPXMock, gitlab: GitLab, api_url: str):
            httpx_mock.add_response(
                url=f"{api_url}/projects?membership=true&min_access_level=30&order_by=name&topic[]=python&topic[]=sdk&visibility=private&per_page=100",
                json=[PROJECT],
            )

            response = gitlab.projects.list(
                membership=True,
                min_access_level=AccessLevel.DEVELOPER,
                order_by=ProjectOrder.NAME,
                topic=["python", "sdk"],
                visibility=ProjectVisibility.PRIVATE,
                per_page=100,
            )

            projects = response.decode()
            assert isinstance(projects[0], Project)
            assert projects[0].path_with_namespace == "diaspora/diaspora-client"

            sent_request = httpx_mock.get_request()
            if sent_request is None:
                raise Exception("No request was sent")

            assert list(sent_request.url.params.multi_items()) == [
                ("membership", "true"),
                ("min_access_level", "30"),
                ("order_by", "name"),
                ("topic[]", "python"),
                ("topic[]", "sdk"),
                ("visibility", "private"),
                ("per_page", "100"),
            ]

        def test_list_without_filters(
            self, httpx_mock: HTTPXMock, gitlab: GitLab, api_url: str
        ):
            httpx_mock.add_response(url=f"{api_url}/projects", json=[])

            gitlab.projects.list()

            sent_request = httpx_mock.get_request()
            assert sent_request is not None
            assert sent_request.url.query == b""

        @pytest.mark.anyio
        async def test_list_async(self, httpx_mock: HTTPXMock, gitlab: GitLab, api_url: str):
            httpx_mock.add_response(url=f"{api_url}/projects?owned=true", json=[PROJECT])

            response = await gitlab.projects.list_async(owned=True)

            assert response.decode()[0].id == 4

    def test_get(self, httpx_mock: HTTPXMock, gitlab: GitLab, api_url: str):
        httpx_mock.add_response(
            url=f"{api_url}/projects/diaspora%2Fdiaspora-client?statistics=true",
            json=PROJECT,
        )

        project = gitlab.projects.get("diaspora/diaspora-client", statistics=True).decode()

        assert project.default_branch == "main"
        assert project.archived is False

    def test_upload(
        self, httpx_mock: HTTPXMock, gitlab: GitLab, api_url: str, tmp_path: Path
    ):
        logo = tmp_path / "logo.png"
        logo.write_bytes(b"\x89PNG")
        httpx_mock.add_response(
            method="POST",
            url=f"{api_url}/projects/4/uploads",
            status_code=201,
            json=UPLOAD,
        )

        uploaded = gitlab.projects.upload(4, logo).decode()

        assert isinstance(uploaded, UploadedFile)
        assert uploaded.markdown == UPLOAD["markdown"]

        sent_request = httpx_mock.get_request()
        if sent_request is None:
            raise Exception("No request was sent")

        body = sent_request.read()
        assert sent_request.headers["Content-Type"].startswith("multipart/form-data")
        assert b'name="file"; filename="logo.png"' in body
        assert b"\x89PNG" in body

    def test_star(self, httpx_mock: HTTPXMock, gitlab: GitLab, api_url: str):
        httpx_mock.add_response(
            method="POST",
            url=f"{api_url}/projects/4/star",
            status_code=201,
            json={**PROJECT, "star_count": 1},
        )

        assert gitlab.projects.star(4).decode().star_count == 1

    def test_star_already_starred(
        self, httpx_mock: HTTPXMock, gitlab: GitLab, api_url: str
    ):
        httpx_mock.add_response(
            method="POST", url=f"{api_url}/projects/4/star", status_code=304
        )

        with pytest.raises(GitLabAPIError) as exc_info:
            gitlab.projects.star(4)

        assert exc_info.value.status_code == 304
        assert exc_info.value.message == "HTTP response received: 304"

    def test_unstar(self, httpx_mock: HTTPXMock, gitlab: GitLab, api_url: str):
        httpx_mock.add_response(
            method="POST",
            url=f"{api_url}/projects/4/unstar",
            status_code=201,
            json=PROJECT,
        )

        assert gitlab.projects.unstar(4).decode().star_count == 0

    @pytest.mark.anyio
    async def test_upload_async(
        self, httpx_mock: HTTPXMock, gitlab: GitLab, api_url: str, tmp_path: Path
    ):
        notes = tmp_path / "notes.txt"
        notes.write_text("release notes")
        httpx_mock.add_response(
            method="POST", url=f"{api_url}/projects/4/uploads", json=UPLOAD
        )

        response = await gitlab.projects.upload_async(4, str(notes))

        assert response.decode().url == UPLOAD["url"]
