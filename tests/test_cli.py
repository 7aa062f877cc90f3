"""Tests for the command-line interface."""

import json

import click
import httpx
import pytest
from click.testing import CliRunner

from gql_introspector import cli
from gql_introspector.core.errors import GraphQLError
from gql_introspector.core.executor import fetch_introspection

from _factories import argument, field, named, non_null, object_type, result, scalar_type, schema_payload


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def introspection_file(tmp_path):
    payload = schema_payload(
        scalar_type("InternalId"),
        object_type("Query", [field("user", named("User", "OBJECT"), args=[argument("id", non_null(named("ID")))])]),
        object_type("User", [field("name", named("String"))]),
    )
    path = tmp_path / "introspection.json"
    path.write_text(json.dumps({"data": payload}))
    return path


class TestParseHeader:
    """Tests for parse_header."""

    def test_key_value(self):
        assert cli.parse_header("Authorization: Bearer abc") == ("Authorization", "Bearer abc")

    def test_value_with_colon(self):
        assert cli.parse_header("X-Url: https://example.com") == ("X-Url", "https://example.com")

    def test_missing_separator(self):
        with pytest.raises(click.BadParameter) as excinfo:
            cli.parse_header("Authorization")
        assert "Key: Value" in str(excinfo.value)


class TestConvert:
    """Tests for the convert command."""

    def test_writes_sdl(self, runner, tmp_path, introspection_file):
        output = tmp_path / "schema.graphql"
        res = runner.invoke(cli.main, ["convert", str(introspection_file), "-o", str(output)])

        assert res.exit_code == 0, res.output
        assert output.read_text() == (
            "scalar InternalId\n\n"
            "type Query {\n  user(id: User): User\n}\n\n"
            "type User {\n  name: String\n}\n\n"
        )

    def test_render_options(self, runner, tmp_path, introspection_file):
        output = tmp_path / "schema.graphql"
        res = runner.invoke(
            cli.main,
            [
                "convert",
                str(introspection_file),
                "-o",
                str(output),
                "--declared-arg-types",
                "--exclude-prefix",
                "Internal",
                "--banner",
                "Generated",
                "--check",
            ],
        )

        assert res.exit_code == 0, res.output
        assert output.read_text() == (
            "# Generated\n\n"
            "type Query {\n  user(id: ID!): User\n}\n\n"
            "type User {\n  name: String\n}\n\n"
        )

    def test_empty_schema_fails(self, runner, tmp_path):
        source = tmp_path / "introspection.json"
        source.write_text(json.dumps(schema_payload()))
        output = tmp_path / "schema.graphql"

        res = runner.invoke(cli.main, ["convert", str(source), "-o", str(output)])

        assert res.exit_code == 1
        assert "No introspection result available to write" in res.output
        assert not output.exists()

    def test_missing_schema_fails(self, runner, tmp_path):
        source = tmp_path / "introspection.json"
        source.write_text(json.dumps({"data": {}}))

        res = runner.invoke(cli.main, ["convert", str(source), "-o", str(tmp_path / "out.graphql")])

        assert res.exit_code == 1
        assert "Introspection result is missing" in res.output

    def test_non_utf8_source_fails(self, runner, tmp_path):
        source = tmp_path / "introspection.json"
        source.write_bytes('{"__schema": {"types": [{"name": "Größe"}]}}'.encode("latin-1"))

        res = runner.invoke(cli.main, ["convert", str(source), "-o", str(tmp_path / "out.graphql")])

        assert res.exit_code == 1
        assert "not valid UTF-8" in res.output

    def test_unwritable_output_fails(self, runner, tmp_path, introspection_file):
        blocker = tmp_path / "file.txt"
        blocker.write_text("not a directory")

        res = runner.invoke(
            cli.main, ["convert", str(introspection_file), "-o", str(blocker / "schema.graphql")]
        )

        assert res.exit_code == 1
        assert "Error:" in res.output
        assert blocker.read_text() == "not a directory"


class TestFetch:
    """Tests for the fetch command."""

    def test_fetch_with_headers(self, runner, tmp_path, monkeypatch):
        calls = []

        def fake_fetch(url, headers, timeout):
            calls.append((url, headers, timeout))
            return result(object_type("User", [field("name", named("String"))]))

        monkeypatch.setattr(cli, "fetch_introspection", fake_fetch)
        output = tmp_path / "schema.graphql"

        res = runner.invoke(
            cli.main,
            [
                "fetch",
                "https://api.example.com/graphql",
                "-o",
                str(output),
                "-H",
                "User-Agent: Awesome-Octocat-App",
                "--timeout",
                "5",
            ],
            env={"GQL_INTROSPECTOR_TOKEN": "secret"},
        )

        assert res.exit_code == 0, res.output
        assert calls == [
            (
                "https://api.example.com/graphql",
                {"User-Agent": "Awesome-Octocat-App", "Authorization": "Bearer secret"},
                5.0,
            )
        ]
        assert output.read_text() == "type User {\n  name: String\n}\n\n"

    def test_bad_header(self, runner, tmp_path):
        res = runner.invoke(
            cli.main,
            ["fetch", "https://api.example.com/graphql", "-o", str(tmp_path / "s.graphql"), "-H", "nocolon"],
        )
        assert res.exit_code == 2
        assert "Key: Value" in res.output

    def test_graphql_error(self, runner, tmp_path, monkeypatch):
        def fake_fetch(url, headers, timeout):
            raise GraphQLError("GraphQL errors: Not authorized", [{"message": "Not authorized"}])

        monkeypatch.setattr(cli, "fetch_introspection", fake_fetch)
        res = runner.invoke(
            cli.main, ["fetch", "https://api.example.com/graphql", "-o", str(tmp_path / "s.graphql")]
        )

        assert res.exit_code == 1
        assert "Not authorized" in res.output

    def test_transport_error(self, runner, tmp_path, monkeypatch):
        def fake_fetch(url, headers, timeout):
            raise httpx.ConnectError("Connection refused")

        monkeypatch.setattr(cli, "fetch_introspection", fake_fetch)
        res = runner.invoke(
            cli.main, ["fetch", "https://api.example.com/graphql", "-o", str(tmp_path / "s.graphql")]
        )

        assert res.exit_code == 1
        assert "Connection refused" in res.output

    def test_non_json_response(self, runner, tmp_path, monkeypatch):
        client = httpx.Client(
            transport=httpx.MockTransport(lambda request: httpx.Response(200, text="<html>login</html>"))
        )

        def fetch_with_client(url, headers, timeout):
            return fetch_introspection(url, headers, timeout=timeout, client=client)

        monkeypatch.setattr(cli, "fetch_introspection", fetch_with_client)
        res = runner.invoke(
            cli.main, ["fetch", "https://api.example.com/graphql", "-o", str(tmp_path / "s.graphql")]
        )

        assert res.exit_code == 1
        assert "is not JSON" in res.output
        assert not (tmp_path / "s.graphql").exists()
