from typing import List, Optional

import strawberry


@strawberry.type
class Post:
    id: int
    title: str
    votes: int


@strawberry.type
class Author:
    id: int
    first_name: str
    last_name: str

    @strawberry.field
    def posts(self) -> List[Post]:
        # demo data until posts are persisted
        return [Post(id=self.id, title="Post 1", votes=1)]


@strawberry.type
class TagType:
    id: strawberry.ID
    name: str
    color: str


@strawberry.type
class ProjectType:
    id: strawberry.ID
    name: str
    hourly_rate: Optional[float]
    client_id: Optional[strawberry.ID]
    tags: List[TagType]

    @classmethod
    def from_model(cls, project) -> "ProjectType":
        return cls(
            id=strawberry.ID(str(project.id)),
            name=project.name,
            hourly_rate=project.hourly_rate,
            client_id=strawberry.ID(str(project.client_id)) if project.client_id else None,
            tags=[TagType(id=strawberry.ID(str(t.id)), name=t.name, color=t.color) for t in project.tags],
        )
