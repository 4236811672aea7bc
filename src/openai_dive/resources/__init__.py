"""资源 handle -- 每个资源族一个"""

from .assistants import Assistants
from .chat import Chat
from .completions import Completions
from .edits import Edits
from .files import Files
from .messages import Messages
from .models import Models
from .runs import Runs
from .threads import Threads

__all__ = [
    "Assistants",
    "Chat",
    "Completions",
    "Edits",
    "Files",
    "Messages",
    "Models",
    "Runs",
    "Threads",
]
