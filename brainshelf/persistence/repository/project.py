"""PostgreSQL implementation of Project repository."""

from typing import Callable, Optional

import logfire
from sqlalchemy import delete, func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from brainshelf.domain.model.common import stamp_on_write, utc_now
from brainshelf.domain.model.project import Project
from brainshelf.domain.repository.project import ProjectRepository
from brainshelf.domain.value import PageRequest, ProjectId
from brainshelf.persistence.mappers import project_to_dict, row_to_project
from brainshelf.persistence.tables import projects_table


class PostgresProjectRepository(ProjectRepository):
    """PostgreSQL implementation of ProjectRepository."""

    def __init__(self, session: AsyncSession, clock: Callable = utc_now) -> None:
        """Initialize repository with database session.

        Args:
            session: Async database session
            clock: Source of write timestamps
        """
        self.session = session
        self.clock = clock

    async def find_by_id(self, project_id: ProjectId) -> Optional[Project]:
        """Find project by ID."""
        stmt = select(projects_table).where(projects_table.c.id == project_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_project(row._asdict()) if row else None

    async def find_all(self, page: PageRequest = PageRequest()) -> list[Project]:
        """Find projects newest first."""
        with logfire.span(
            "project_repository.find_all", page=page.number, page_size=page.size
        ):
            stmt = (
                select(projects_table)
                .order_by(projects_table.c.created_at.desc(), projects_table.c.id)
                .limit(page.size)
                .offset(page.offset)
            )
            result = await self.session.execute(stmt)
            return [row_to_project(row._asdict()) for row in result.fetchall()]

    async def count(self) -> int:
        """Count all projects."""
        return (
            await self.session.scalar(select(func.count()).select_from(projects_table))
            or 0
        )

    async def save(self, project: Project) -> Project:
        """Insert or update a project."""
        with logfire.span("project_repository.save", project_id=str(project.id)):
            existing = await self.find_by_id(project.id)
            now = self.clock()

            if existing:
                project = stamp_on_write(
                    project.model_copy(update={"created_at": existing.created_at}),
                    is_new=False,
                    now=now,
                )
                stmt = (
                    update(projects_table)
                    .where(projects_table.c.id == project.id)
                    .values(**project_to_dict(project))
                )
            else:
                project = stamp_on_write(project, is_new=True, now=now)
                stmt = insert(projects_table).values(**project_to_dict(project))

            await self.session.execute(stmt)
            await self.session.flush()
            return project

    async def delete(self, project_id: ProjectId) -> bool:
        """Delete a project; its entries cascade."""
        with logfire.span("project_repository.delete", project_id=str(project_id)):
            stmt = delete(projects_table).where(projects_table.c.id == project_id)
            result = await self.session.execute(stmt)
            await self.session.flush()
            return result.rowcount > 0
