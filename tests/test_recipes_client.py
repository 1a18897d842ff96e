"""
Tests for ``RecipesClient``.

The ``requests.Session`` is replaced by a mock that returns real
``requests.Response`` objects, so status handling and JSON decoding
run through ``requests`` itself.
"""

import json
from unittest.mock import Mock

import pytest
import requests

from recipes_client import RecipesClient


def make_response(status_code, body=None, text=None):
    response = requests.Response()
    response.status_code = status_code
    response.url = "http://recipes.test/recipes"
    if body is not None:
        response._content = json.dumps(body).encode("utf-8")
        response.headers["Content-Type"] = "application/json"
    else:
        response._content = (text or "").encode("utf-8")
    return response


@pytest.fixture
def session():
    return Mock(spec=requests.Session)


@pytest.fixture
def api(session):
    return RecipesClient(base_url="http://recipes.test/", session=session)


class TestRecipesClient:
    def test_list_recipes(self, api, session):
        recipes = [{"id": "1", "name": "milkshake", "ingredients": ["1 cup milk"]}]
        session.request.return_value = make_response(200, recipes)

        data, error = api.list_recipes()

        assert error is None
        assert data == recipes
        kwargs = session.request.call_args.kwargs
        assert kwargs["method"] == "GET"
        assert kwargs["url"] == "http://recipes.test/recipes"

    def test_create_recipe(self, api, session):
        created = {"id": "abc", "name": "hot tea", "ingredients": ["tea bag"]}
        session.request.return_value = make_response(201, created)

        data, error = api.create_recipe("hot tea", ["tea bag"])

        assert error is None
        assert data == created
        assert session.request.call_args.kwargs["json"] == {"name": "hot tea", "ingredients": ["tea bag"]}

    def test_create_recipe_error_uses_detail(self, api, session):
        session.request.return_value = make_response(
            400, {"detail": "Missing `name` in request body", "field": "name"}
        )

        data, error = api.create_recipe("", [])

        assert data is None
        assert error == {"status_code": 400, "message": "Missing `name` in request body"}

    def test_replace_recipe(self, api, session):
        session.request.return_value = make_response(204)

        ok, error = api.replace_recipe("abc", "fruit salad", ["apples"])

        assert ok is True
        assert error is None
        kwargs = session.request.call_args.kwargs
        assert kwargs["method"] == "PUT"
        assert kwargs["url"] == "http://recipes.test/recipes/abc"
        assert kwargs["json"] == {"id": "abc", "name": "fruit salad", "ingredients": ["apples"]}

    def test_replace_recipe_not_found(self, api, session):
        session.request.return_value = make_response(404, {"detail": "Recipe `abc` not found", "field": "id"})

        ok, error = api.replace_recipe("abc", "fruit salad", [])

        assert ok is False
        assert error["status_code"] == 404

    def test_delete_recipe(self, api, session):
        session.request.return_value = make_response(204)

        ok, error = api.delete_recipe("abc")

        assert ok is True
        assert error is None
        assert session.request.call_args.kwargs["method"] == "DELETE"

    def test_plain_text_error(self, api, session):
        session.request.return_value = make_response(500, text="Internal Server Error")

        data, error = api.list_recipes()

        assert data == []
        assert error == {"status_code": 500, "message": "Internal Server Error"}

    def test_connection_error(self, api, session):
        session.request.side_effect = requests.ConnectionError("refused")

        ok, error = api.delete_recipe("abc")

        assert ok is False
        assert error == {"status_code": None, "message": "refused"}

    def test_api_key_header(self, session):
        session.request.return_value = make_response(200, [])
        api = RecipesClient(base_url="http://recipes.test", api_key="secret", session=session)

        api.list_recipes()

        assert session.request.call_args.kwargs["headers"] == {"Authorization": "Bearer secret"}
