from timestack.models.user import User
from timestack.models.client import Client
from timestack.models.project import Project, ProjectTag
from timestack.models.task import Task
from timestack.models.tag import Tag

__all__ = ["User", "Client", "Project", "ProjectTag", "Task", "Tag"]
