import uuid
from typing import List

import strawberry
from fastapi import Depends
from sqlmodel import Session
from strawberry.fastapi import GraphQLRouter
from strawberry.types import Info

from timestack.database import get_db
from timestack.resolvers.types import Author, ProjectType
from timestack.services import workspace as service


@strawberry.type
class Query:
    @strawberry.field(name="author")
    def get_author(self, id: int) -> Author:
        return Author(id=id, first_name="John", last_name="Doe")

    @strawberry.field
    def projects(self, info: Info, workspace_id: strawberry.ID) -> List[ProjectType]:
        db: Session = info.context["db"]
        projects = service.list_projects(db, uuid.UUID(str(workspace_id)))
        return [ProjectType.from_model(p) for p in projects]


schema = strawberry.Schema(query=Query)


def get_context(db: Session = Depends(get_db)):
    return {"db": db}


def create_graphql_router() -> GraphQLRouter:
    # GraphiQL stays on so the schema can be explored in the browser
    return GraphQLRouter(schema, context_getter=get_context, graphql_ide="graphiql")
