"""PostgreSQL implementation of Template repository."""

from typing import Callable, Optional

import logfire
from sqlalchemy import delete, insert, or_, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from brainshelf.domain.model.common import stamp_on_write, utc_now
from brainshelf.domain.model.template import Template
from brainshelf.domain.repository.template import TemplateRepository
from brainshelf.domain.value import ProjectId, TemplateId
from brainshelf.persistence.mappers import row_to_template, template_to_dict
from brainshelf.persistence.tables import templates_table


class PostgresTemplateRepository(TemplateRepository):
    """PostgreSQL implementation of TemplateRepository."""

    def __init__(self, session: AsyncSession, clock: Callable = utc_now) -> None:
        """Initialize repository with database session.

        Args:
            session: Async database session
            clock: Source of write timestamps
        """
        self.session = session
        self.clock = clock

    async def find_by_id(self, template_id: TemplateId) -> Optional[Template]:
        """Find template by ID."""
        stmt = select(templates_table).where(templates_table.c.id == template_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_template(row._asdict()) if row else None

    async def find_all(self, project_id: Optional[ProjectId] = None) -> list[Template]:
        """Global templates, plus the project's own when a project is given."""
        with logfire.span(
            "template_repository.find_all",
            project_id=str(project_id) if project_id else None,
        ):
            stmt = select(templates_table)
            if project_id:
                stmt = stmt.where(
                    or_(
                        templates_table.c.project_id.is_(None),
                        templates_table.c.project_id == project_id,
                    )
                )
            stmt = stmt.order_by(templates_table.c.name)

            result = await self.session.execute(stmt)
            return [row_to_template(row._asdict()) for row in result.fetchall()]

    async def find_defaults(self) -> list[Template]:
        """Templates flagged as default."""
        stmt = (
            select(templates_table)
            .where(templates_table.c.is_default.is_(True))
            .order_by(templates_table.c.name)
        )
        result = await self.session.execute(stmt)
        return [row_to_template(row._asdict()) for row in result.fetchall()]

    async def save(self, template: Template) -> Template:
        """Insert or update a template."""
        with logfire.span("template_repository.save", template_id=str(template.id)):
            existing = await self.find_by_id(template.id)
            now = self.clock()

            if existing:
                template = stamp_on_write(
                    template.model_copy(update={"created_at": existing.created_at}),
                    is_new=False,
                    now=now,
                )
                stmt = (
                    update(templates_table)
                    .where(templates_table.c.id == template.id)
                    .values(**template_to_dict(template))
                )
            else:
                template = stamp_on_write(template, is_new=True, now=now)
                stmt = insert(templates_table).values(**template_to_dict(template))

            await self.session.execute(stmt)
            await self.session.flush()
            return template

    async def delete(self, template_id: TemplateId) -> bool:
        """Delete a template."""
        with logfire.span("template_repository.delete", template_id=str(template_id)):
            stmt = delete(templates_table).where(templates_table.c.id == template_id)
            result = await self.session.execute(stmt)
            await self.session.flush()
            return result.rowcount > 0
