import uuid

import pytest

from timestack.exceptions import RecordNotFoundError, WorkspaceMismatchError, WorkspaceNotFoundError
from timestack.schemas import ClientCreate, ProjectCreate, TagCreate, TaskCreate, UserCreate
from timestack.services import workspace as service


def client_data(name="Acme"):
    return ClientCreate(
        name=name,
        currency="EUR",
        payment_method="transfer",
        emails=["billing@acme.com"],
        preference_channel="email",
    )


@pytest.fixture
def ada(session):
    return service.create_user(session, UserCreate(name="Ada", email="ada@example.com"))


@pytest.fixture
def bob(session):
    return service.create_user(session, UserCreate(name="Bob", email="bob@example.com"))


def test_unknown_workspace_is_rejected(session):
    with pytest.raises(WorkspaceNotFoundError):
        service.create_client(session, uuid.uuid4(), client_data())


def test_project_with_client_from_same_workspace(session, ada):
    acme = service.create_client(session, ada.workspace_id, client_data())

    project = service.create_project(session, ada.workspace_id, ProjectCreate(name="Website", client_id=acme.id))

    assert project.client_id == acme.id
    assert project.workspace_id == ada.workspace_id


def test_project_with_client_from_other_workspace_is_rejected(session, ada, bob):
    acme = service.create_client(session, ada.workspace_id, client_data())

    with pytest.raises(WorkspaceMismatchError):
        service.create_project(session, bob.workspace_id, ProjectCreate(name="Website", client_id=acme.id))


def test_project_with_unknown_client_is_rejected(session, ada):
    with pytest.raises(RecordNotFoundError):
        service.create_project(session, ada.workspace_id, ProjectCreate(name="Website", client_id=uuid.uuid4()))


def test_task_with_project_from_other_workspace_is_rejected(session, ada, bob):
    project = service.create_project(session, ada.workspace_id, ProjectCreate(name="Website"))

    with pytest.raises(WorkspaceMismatchError):
        service.create_task(session, bob.workspace_id, TaskCreate(name="Design", project_id=project.id))


def test_tag_from_other_workspace_cannot_be_attached(session, ada, bob):
    project = service.create_project(session, ada.workspace_id, ProjectCreate(name="Website"))
    tag = service.create_tag(session, bob.workspace_id, TagCreate(name="urgent", color="red"))

    with pytest.raises(WorkspaceMismatchError):
        service.attach_tag(session, ada.workspace_id, project.id, tag.id)


def test_attach_tag_is_idempotent(session, ada):
    project = service.create_project(session, ada.workspace_id, ProjectCreate(name="Website"))
    tag = service.create_tag(session, ada.workspace_id, TagCreate(name="urgent", color="red"))

    service.attach_tag(session, ada.workspace_id, project.id, tag.id)
    project = service.attach_tag(session, ada.workspace_id, project.id, tag.id)

    assert [t.id for t in project.tags] == [tag.id]


def test_lists_are_scoped_to_the_workspace(session, ada, bob):
    service.create_project(session, ada.workspace_id, ProjectCreate(name="Ada's"))
    service.create_project(session, bob.workspace_id, ProjectCreate(name="Bob's"))

    assert [p.name for p in service.list_projects(session, ada.workspace_id)] == ["Ada's"]
    assert [p.name for p in service.list_projects(session, bob.workspace_id)] == ["Bob's"]


def test_list_tasks_by_project(session, ada):
    website = service.create_project(session, ada.workspace_id, ProjectCreate(name="Website"))
    service.create_task(session, ada.workspace_id, TaskCreate(name="Design", is_billable=True, project_id=website.id))
    service.create_task(session, ada.workspace_id, TaskCreate(name="Admin"))

    tasks = service.list_tasks(session, ada.workspace_id, project_id=website.id)

    assert [t.name for t in tasks] == ["Design"]
    assert len(service.list_tasks(session, ada.workspace_id)) == 2


def test_delete_project_keeps_tags(session, ada):
    project = service.create_project(session, ada.workspace_id, ProjectCreate(name="Website"))
    tag = service.create_tag(session, ada.workspace_id, TagCreate(name="urgent", color="red"))
    service.attach_tag(session, ada.workspace_id, project.id, tag.id)

    service.delete_project(session, ada.workspace_id, project.id)

    assert service.list_projects(session, ada.workspace_id) == []
    assert [t.id for t in service.list_tags(session, ada.workspace_id)] == [tag.id]
