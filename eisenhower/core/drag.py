"""
FILE: eisenhower/core/drag.py
PURPOSE: Drag gesture session that turns a drag-and-drop into a TaskStore move
EXPORTS:
  - DragState (enum: IDLE, DRAGGING)
  - DragPayload (frozen dataclass, the transport-carried data)
  - DragSession (class)
DEPENDENCIES:
  - dataclasses (stdlib)
  - enum (stdlib)
  - json (stdlib)
  - logging (stdlib)
  - eisenhower.core.models (TaskList)
  - eisenhower.core.exceptions (InvalidDragPayloadError, InvalidListError)
NOTES:
  - State machine: IDLE -> DRAGGING -> IDLE
  - begin_drag() returns a self-contained JSON payload for the host UI's
    drag transport, so a drop can be resolved even if the UI was rebuilt
    and the session restarted in between
  - Payloads arriving on drop are untrusted: malformed ones are logged and
    dropped without touching the store
  - One gesture at a time; beginning a new drag abandons the previous one
"""

import json
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .exceptions import InvalidDragPayloadError, InvalidListError
from .models import TaskList

logger = logging.getLogger(__name__)


class DragState(Enum):
    IDLE = "idle"
    DRAGGING = "dragging"


@dataclass(frozen=True)
class DragPayload:
    """Identifies the dragged task and the list it was picked up from."""

    task_id: str
    source_list: TaskList

    def to_json(self) -> str:
        return json.dumps({"id": self.task_id, "sourceList": self.source_list.value})

    @classmethod
    def from_json(cls, raw) -> "DragPayload":
        """
        Parse a payload received from the drag transport.

        Raises:
            InvalidDragPayloadError: If raw is not a well-formed payload
        """
        if not isinstance(raw, str) or not raw.strip():
            raise InvalidDragPayloadError("empty payload")

        try:
            data = json.loads(raw)
        except ValueError as e:
            raise InvalidDragPayloadError(str(e)) from e

        if not isinstance(data, dict):
            raise InvalidDragPayloadError(f"expected an object, got {type(data).__name__}")

        task_id = data.get("id")
        if not isinstance(task_id, str) or not task_id:
            raise InvalidDragPayloadError(f"bad task id {task_id!r}")

        try:
            source_list = TaskList.parse(data.get("sourceList"))
        except InvalidListError as e:
            raise InvalidDragPayloadError(str(e)) from e

        return cls(task_id=task_id, source_list=source_list)


class DragSession:
    """
    One drag gesture at a time over a TaskStore.

    Usage:
        session = DragSession(store)
        data = session.begin_drag(task.id, TaskList.INBOX)
        ...                                   # UI carries data
        session.drop(TaskList.URGENT_IMPORTANT, data)
    """

    def __init__(self, store):
        self._store = store
        self._payload: Optional[DragPayload] = None

    @property
    def state(self) -> DragState:
        return DragState.IDLE if self._payload is None else DragState.DRAGGING

    @property
    def payload(self) -> Optional[DragPayload]:
        """Payload of the active gesture, or None when idle."""
        return self._payload

    @property
    def is_dragging(self) -> bool:
        return self._payload is not None

    def begin_drag(self, task_id: str, source_list) -> str:
        """
        Start a gesture for task_id picked up from source_list.

        Returns:
            Serialized payload to hand to the UI's drag transport

        Raises:
            InvalidListError: If source_list names no list
        """
        payload = DragPayload(task_id=task_id, source_list=TaskList.parse(source_list))

        if self._payload is not None:
            logger.debug("Abandoning drag of %s for a new gesture", self._payload.task_id)

        self._payload = payload
        logger.debug("Dragging %s from %s", task_id, payload.source_list.value)
        return payload.to_json()

    def drop(self, target_list, transport_data: Optional[str] = None) -> bool:
        """
        Finish the gesture over target_list.

        Args:
            target_list: List the task was dropped on
            transport_data: Payload as delivered by the UI's drag transport;
                if omitted, the payload captured by begin_drag() is used

        Returns:
            True if the store moved the task, False otherwise

        Notes:
            - Always returns the session to IDLE
            - Malformed payloads are logged, never raised
            - A stale payload (task no longer in its source list) is a no-op
        """
        captured, self._payload = self._payload, None
        target = TaskList.parse(target_list)

        if transport_data is not None:
            try:
                payload = DragPayload.from_json(transport_data)
            except InvalidDragPayloadError as e:
                logger.warning("Rejected drop on %s: %s", target.value, e)
                return False
        elif captured is not None:
            payload = captured
        else:
            logger.debug("Drop on %s with no active drag", target.value)
            return False

        moved = self._store.move_task(payload.task_id, payload.source_list, target)
        if not moved and payload.source_list is not target:
            logger.info(
                "Stale drop: task %s is no longer in %s",
                payload.task_id, payload.source_list.value,
            )
        return moved

    def cancel(self) -> None:
        """Abandon the gesture without changing the store."""
        if self._payload is not None:
            logger.debug("Cancelled drag of %s", self._payload.task_id)
        self._payload = None
