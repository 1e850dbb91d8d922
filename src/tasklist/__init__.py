from __future__ import annotations

from .__about__ import __version__ as __version__
from .app import create_app as create_app
from .exceptions import TaskNotFound as TaskNotFound, TasklistError as TasklistError
from .models import Task as Task
from .store import TaskStore as TaskStore
