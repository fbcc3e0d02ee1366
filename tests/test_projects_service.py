"""Tests for the project service."""

import pytest

from folio.core import pages, projects
from folio.core.errors import (
    InvalidDocumentError,
    InvalidReorderError,
    NotFoundError,
    PageNotFoundError,
    ProjectNotFoundError,
)
from folio.core.reorder import ReorderEntry
from folio.core.yaml_codec import decode
from folio.db import projects_repository


@pytest.fixture
def owner(db):
    """Users u1 and u2, each with a page; returns u1."""
    pages.create_page("u1", "jane", "ocean")
    pages.create_page("u2", "john", "earth")
    return "u1"


class TestCreateProject:
    """Tests for create_project()."""

    @pytest.mark.asyncio
    async def test_slug_from_name(self, owner):
        record = await projects.create_project(owner, "My Awesome Project!! 2024")
        assert record.project_id == "my-awesome-project-2024"
        assert record.project_name == "My Awesome Project!! 2024"

    @pytest.mark.asyncio
    async def test_collision_chain(self, owner):
        ids = [(await projects.create_project(owner, "My Project")).project_id for _ in range(3)]
        assert ids == ["my-project", "my-project-2", "my-project-3"]

    @pytest.mark.asyncio
    async def test_slugs_scoped_per_owner(self, owner):
        await projects.create_project("u1", "Demo")
        record = await projects.create_project("u2", "Demo")
        assert record.project_id == "demo"

    @pytest.mark.asyncio
    async def test_empty_slug_fallback(self, owner):
        record = await projects.create_project(owner, "!!!")
        assert record.project_id == "project"

    @pytest.mark.asyncio
    async def test_requires_page(self, db):
        with pytest.raises(PageNotFoundError):
            await projects.create_project("nobody", "Demo")

    @pytest.mark.asyncio
    async def test_rename_keeps_slug(self, owner):
        await projects.create_project(owner, "Demo")
        record = projects.rename_project(owner, "demo", "Something Else")
        assert record.project_id == "demo"
        assert record.project_name == "Something Else"


class TestProjectContent:
    @pytest.mark.asyncio
    async def test_update_and_download(self, owner, project_yaml):
        await projects.create_project(owner, "Grocery App")
        projects.update_project_content(owner, "grocery-app", project_yaml)
        assert decode(projects.download_project_content(owner, "grocery-app")) == decode(project_yaml)

    @pytest.mark.asyncio
    async def test_invalid_content(self, owner):
        await projects.create_project(owner, "Demo")
        with pytest.raises(InvalidDocumentError) as exc_info:
            projects.update_project_content(
                owner,
                "demo",
                "name: D\ndescription: d\nstart_date: 2024-06-01\nend_date: 2024-01-01\n",
            )
        assert exc_info.value.details() == [
            {"field": "end_date", "issue": "End date must be after or equal to start date"}
        ]
        with pytest.raises(ProjectNotFoundError):
            projects.get_project_content(owner, "demo")

    def test_foreign_project(self, owner, project_yaml):
        with pytest.raises(ProjectNotFoundError):
            projects.update_project_content(owner, "not-mine", project_yaml)


class TestReorderProjects:
    """Tests for reorder_projects()."""

    @pytest.mark.asyncio
    async def test_reorder(self, owner):
        for name in ("A", "B", "C"):
            await projects.create_project(owner, name)

        await projects.reorder_projects(
            owner,
            [ReorderEntry("a", 5), ReorderEntry("b", 0), ReorderEntry("c", 2)],
        )

        listed = projects.list_projects(owner)
        assert [(p.project_id, p.display_order) for p in listed] == [("b", 0), ("c", 2), ("a", 5)]

    @pytest.mark.asyncio
    async def test_foreign_id_changes_nothing(self, owner):
        await projects.create_project("u1", "A")
        await projects.create_project("u2", "Theirs")

        with pytest.raises(NotFoundError):
            await projects.reorder_projects(
                owner, [ReorderEntry("a", 9), ReorderEntry("theirs", 0)]
            )

        assert projects.get_project("u1", "a").display_order == 0
        assert projects.get_project("u2", "theirs").display_order == 0

    @pytest.mark.asyncio
    async def test_project_vanished_after_check(self, owner, monkeypatch):
        """A project deleted after the ownership check rolls back the batch."""
        await projects.create_project(owner, "A")
        monkeypatch.setattr(
            projects_repository, "owned_project_ids", lambda conn, user_id, ids: set(ids)
        )

        with pytest.raises(ProjectNotFoundError):
            await projects.reorder_projects(
                owner, [ReorderEntry("a", 4), ReorderEntry("gone", 1)]
            )

        assert projects.get_project(owner, "a").display_order == 0

    @pytest.mark.asyncio
    async def test_duplicate_ids(self, owner):
        await projects.create_project(owner, "A")
        with pytest.raises(InvalidReorderError):
            await projects.reorder_projects(owner, [ReorderEntry("a", 1), ReorderEntry("a", 2)])


class TestPublicProject:
    @pytest.mark.asyncio
    async def test_public_project(self, owner, project_yaml):
        await projects.create_project(owner, "Grocery App")
        projects.update_project_content(owner, "grocery-app", project_yaml)
        record, content = projects.get_public_project("jane", "grocery-app")
        assert record.project_name == "Grocery App"
        assert content.name == "Grocery App"

    def test_unknown_page(self, owner):
        with pytest.raises(PageNotFoundError):
            projects.get_public_project("ghost", "demo")
