from timestack.resolvers.schema import schema

AUTHOR_QUERY = """
query {
  author(id: 42) {
    id
    firstName
    lastName
    posts { id title votes }
  }
}
"""


def test_author_demo_data():
    result = schema.execute_sync(AUTHOR_QUERY)

    assert result.errors is None
    assert result.data == {
        "author": {
            "id": 42,
            "firstName": "John",
            "lastName": "Doe",
            "posts": [{"id": 42, "title": "Post 1", "votes": 1}],
        }
    }


def test_author_over_http(client):
    response = client.post("/v1/graphql", json={"query": AUTHOR_QUERY})

    assert response.status_code == 200
    assert response.json()["data"]["author"]["lastName"] == "Doe"


def test_projects_query_reads_the_workspace(client):
    user = client.post("/v1/users", json={"name": "Ada", "email": "ada@example.com"}).json()
    ws = user["workspace_id"]
    project = client.post(f"/v1/workspaces/{ws}/projects", json={"name": "Website", "hourly_rate": 50}).json()
    tag = client.post(f"/v1/workspaces/{ws}/tags", json={"name": "urgent", "color": "red"}).json()
    client.put(f"/v1/workspaces/{ws}/projects/{project['id']}/tags/{tag['id']}")

    query = """
    query ($ws: ID!) {
      projects(workspaceId: $ws) { id name hourlyRate clientId tags { name color } }
    }
    """
    response = client.post("/v1/graphql", json={"query": query, "variables": {"ws": ws}})

    assert response.status_code == 200
    assert response.json()["data"]["projects"] == [
        {
            "id": project["id"],
            "name": "Website",
            "hourlyRate": 50.0,
            "clientId": None,
            "tags": [{"name": "urgent", "color": "red"}],
        }
    ]
