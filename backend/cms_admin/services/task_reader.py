"""
Task reader
"""
from typing import List

from sqlalchemy.orm import joinedload

from cms_admin.models.task import Task
from cms_admin.schemas.rows import TaskRow
from cms_admin.services.base_reader import BaseReader


class TaskReader(BaseReader):

    def get_tasks(self) -> List[TaskRow]:
        """All tasks with their owner, newest first"""
        return self._read_list(
            "tasks",
            lambda db: (
                db.query(Task)
                .options(joinedload(Task.owner))
                .order_by(Task.created_at.desc())
                .all()
            ),
            TaskRow,
        )
