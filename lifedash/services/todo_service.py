# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the LifeDash - Personal Tracking Dashboard project.
# Licensed under the MIT License - see the LICENSE file for details.

from datetime import datetime
from typing import Optional

from lifedash.schemas.records import TodoGroup
from lifedash.services import sub_records
from lifedash.services.tracker_service import TrackerService, serialized
from lifedash.utils.time_utils import day_title, now_utc


class TodoService(TrackerService):
    collection = "todoGroups"
    model = TodoGroup
    order_field = "createdAt"
    descending = True  # newest group first

    @serialized
    def add_group(self, now: Optional[datetime] = None):
        now = now or now_utc()
        return self._create(TodoGroup(title=day_title(now), created_at=now))

    @serialized
    def delete_group(self, group_id: str):
        return self._delete(group_id)

    def find_todo(self, group_id: str, todo_id: str):
        group = self.get(group_id)
        if group is None:
            return None, None
        for todo in group.todos:
            if todo.id == todo_id:
                return group, todo
        return group, None

    @serialized
    def add_todo(self, group_id: str, text: Optional[str]):
        todo = sub_records.make_todo(text)
        if todo is None:
            return None
        group = self.get(group_id)
        if group is None:
            return None
        return self._update(group_id, {"todos": [todo, *group.todos]})

    @serialized
    def update_todo_text(self, group_id: str, todo_id: str, text: Optional[str]):
        text = sub_records.clean_text(text)
        if text is None:
            return None
        group, todo = self.find_todo(group_id, todo_id)
        if todo is None:
            return None
        return self._update(group_id, {"todos": sub_records.update_todo(group.todos, todo_id, text=text)})

    @serialized
    def toggle_todo(self, group_id: str, todo_id: str):
        group, todo = self.find_todo(group_id, todo_id)
        if todo is None:
            return None
        return self._update(group_id, {
            "todos": sub_records.update_todo(group.todos, todo_id, completed=not todo.completed),
        })

    @serialized
    def delete_todo(self, group_id: str, todo_id: str):
        group, todo = self.find_todo(group_id, todo_id)
        if todo is None:
            return None
        return self._update(group_id, {"todos": sub_records.without_item(group.todos, todo_id)})

    @serialized
    def add_todo_note(self, group_id: str, todo_id: str, text: Optional[str]):
        if sub_records.clean_text(text) is None:
            return None
        group, todo = self.find_todo(group_id, todo_id)
        if todo is None:
            return None
        notes = sub_records.with_note(todo.notes, sub_records.make_note(text))
        return self._update(group_id, {"todos": sub_records.update_todo(group.todos, todo_id, notes=notes)})

    @serialized
    def delete_todo_note(self, group_id: str, todo_id: str, note_id: str):
        group, todo = self.find_todo(group_id, todo_id)
        if todo is None or not sub_records.contains_item(todo.notes, note_id):
            return None
        notes = sub_records.without_item(todo.notes, note_id)
        return self._update(group_id, {"todos": sub_records.update_todo(group.todos, todo_id, notes=notes)})
