#!/usr/bin/env python3
"""
Tests for the API builder and document rendering.
"""

import orjson
import pytest
from pydantic import BaseModel

from swagkit import api as swag
from swagkit import endpoint as ep
from swagkit.models import API, SecurityScheme
from swagkit.naming import NamingPolicy
from swagkit.security import api_key_security, basic_security, google_endpoints_security, oauth2_security


class Pet(BaseModel):
    id: int
    name: str


class Owner:
    pass


class Keeper(BaseModel):
    name: str


class Dog(BaseModel):
    keeper: Keeper


def _pet_endpoints():
    return (
        ep.new_endpoint("get", "/pets/{id}", "Find pet", ep.path("id", "integer"), ep.response(200, Pet, "ok")),
        ep.new_endpoint("post", "/pets", "Add pet", ep.body(Pet, "The pet"), ep.response(201, None, "created")),
    )


class TestInfo:
    """Info and top-level options."""

    def test_info_options(self):
        """Info fields are set by options."""
        document = swag.new_api(
            swag.title("Petstore"),
            swag.description("Pets"),
            swag.version("1.0.0"),
            swag.terms_of_service("http://example.com/terms"),
            swag.contact_email("api@example.com"),
            swag.license("Apache 2.0", "http://www.apache.org/licenses/LICENSE-2.0.html"),
        ).to_dict()
        assert document["swagger"] == "2.0"
        assert document["info"] == {
            "description": "Pets",
            "version": "1.0.0",
            "termsOfService": "http://example.com/terms",
            "title": "Petstore",
            "contact": {"email": "api@example.com"},
            "license": {"name": "Apache 2.0", "url": "http://www.apache.org/licenses/LICENSE-2.0.html"},
        }

    def test_host_and_schemes(self):
        """Host, base path and schemes."""
        document = swag.new_api(swag.host("api.example.com"), swag.base_path("/v2"), swag.schemes("https")).to_dict()
        assert document["host"] == "api.example.com"
        assert document["basePath"] == "/v2"
        assert document["schemes"] == ["https"]

    def test_empty_document(self):
        """An empty API still has info and paths."""
        assert swag.new_api().to_dict() == {"swagger": "2.0", "info": {}, "paths": {}}

    def test_tags(self):
        """Tags with external docs."""
        document = swag.new_api(
            swag.tag("pets", "Everything about pets", swag.tag_description("Find out more"), swag.tag_url("http://x")),
            swag.tag("store"),
        ).to_dict()
        assert document["tags"] == [
            {"name": "pets", "description": "Everything about pets", "externalDocs": {"description": "Find out more", "url": "http://x"}},
            {"name": "store"},
        ]


class TestSecurity:
    """Security definitions and requirements."""

    def test_schemes(self):
        """Factories render their Swagger shape."""
        document = swag.new_api(
            swag.security_scheme("basic", basic_security()),
            swag.security_scheme("key", api_key_security("X-API-Key")),
            swag.security_scheme(
                "oauth", oauth2_security("accessCode", "http://a", "http://t", {"read": "Read access"})
            ),
            swag.security_definition("raw", {"type": "basic"}),
            swag.security("key"),
        ).to_dict()
        definitions = document["securityDefinitions"]
        assert definitions["basic"] == {"type": "basic"}
        assert definitions["key"] == {"type": "apiKey", "name": "X-API-Key", "in": "header"}
        assert definitions["oauth"] == {
            "type": "oauth2",
            "flow": "accessCode",
            "authorizationUrl": "http://a",
            "tokenUrl": "http://t",
            "scopes": {"read": "Read access"},
        }
        assert definitions["raw"] == {"type": "basic"}
        assert document["security"] == [{"key": []}]

    def test_security_scheme_requires_scheme(self):
        """Raw mappings go through security_definition, not security_scheme."""
        with pytest.raises(TypeError):
            swag.security_scheme("raw", {"type": "basic"})

    def test_security_definition_requires_mapping(self):
        """Scheme objects go through security_scheme."""
        with pytest.raises(TypeError):
            swag.security_definition("basic", basic_security())

    def test_security_definition_is_copied(self):
        """Later edits to the caller's mapping do not leak into the document."""
        raw = {"type": "basic"}
        api = swag.new_api(swag.security_definition("raw", raw))
        raw["type"] = "apiKey"
        assert api.to_dict()["securityDefinitions"]["raw"] == {"type": "basic"}

    def test_google_endpoints(self):
        """Cloud Endpoints extension fields are emitted as-is."""
        scheme = google_endpoints_security("issuer", "https://jwks", "aud")
        assert isinstance(scheme, SecurityScheme)
        data = scheme.to_dict()
        assert data["type"] == "oauth2"
        assert data["flow"] == "implicit"
        assert data["authorizationUrl"] == ""
        assert data["x-google-issuer"] == "issuer"
        assert data["x-google-jwks_uri"] == "https://jwks"
        assert data["x-google-audiences"] == "aud"


class TestEndpoints:
    """Paths and definitions."""

    def test_paths_grouped_by_path(self):
        """Operations are keyed by lower-case method."""
        document = swag.new_api(swag.endpoints(*_pet_endpoints())).to_dict()
        assert set(document["paths"]) == {"/pets/{id}", "/pets"}
        assert set(document["paths"]["/pets/{id}"]) == {"get"}
        assert document["paths"]["/pets"]["post"]["operationId"] == "postPets"

    def test_references_resolved(self):
        """Body and response types become definition references."""
        document = swag.new_api(swag.endpoints(*_pet_endpoints())).to_dict()
        response = document["paths"]["/pets/{id}"]["get"]["responses"]["200"]
        assert response["schema"] == {"$ref": "#/definitions/Pet"}
        parameter = document["paths"]["/pets"]["post"]["parameters"][0]
        assert parameter["schema"] == {"$ref": "#/definitions/Pet"}
        assert list(document["definitions"]) == ["Pet"]

    def test_naming_policy_applies_regardless_of_order(self):
        """The naming option may come after the endpoints."""
        api = swag.new_api(
            swag.endpoints(ep.new_endpoint("get", "/owners", "List", ep.response(200, list[Owner], "ok"))),
            swag.naming(NamingPolicy(qualify_with_package=True, strip_prefixes=("test_",))),
        )
        assert api.definitions.names() == ["api_builder_Owner"]
        schema = api.to_dict()["paths"]["/owners"]["get"]["responses"]["200"]["schema"]
        assert schema == {"type": "array", "items": {"$ref": "#/definitions/api_builder_Owner"}}

    def test_nested_model_shares_one_definition(self):
        """A model nested in another and returned directly is defined once."""
        api = swag.new_api(
            swag.naming(NamingPolicy(qualify_with_package=True)),
            swag.endpoints(
                ep.new_endpoint("get", "/dogs", "Dogs", ep.response(200, Dog, "ok")),
                ep.new_endpoint("get", "/keepers", "Keepers", ep.response(200, Keeper, "ok")),
            ),
        )
        assert api.definitions.names() == ["test_api_builder_Keeper", "test_api_builder_Dog"]
        dog = api.definitions.get("test_api_builder_Dog")
        assert dog["properties"]["keeper"] == {"$ref": "#/definitions/test_api_builder_Keeper"}

    def test_descriptor_prototypes(self):
        """Descriptor strings work as prototypes."""
        api = swag.new_api(
            swag.endpoints(
                ep.new_endpoint("get", "/raw", "Raw", ep.response(200, "map[string]encoding/json.RawMessage", "ok"))
            ),
        )
        schema = api.to_dict()["paths"]["/raw"]["get"]["responses"]["200"]["schema"]
        assert schema == {"type": "object", "additionalProperties": {"$ref": "#/definitions/RawMessage"}}

    def test_caller_definition(self):
        """A caller supplied definition body is registered."""
        body = {"type": "object", "properties": {"name": {"type": "string"}}}
        api = swag.new_api(
            swag.endpoints(ep.new_endpoint("post", "/owners", "Add", ep.body(Owner, definition=body))),
        )
        assert api.definitions.get("Owner") == body

    def test_add_endpoints_later(self):
        """Endpoints added after construction are resolved too."""
        api = swag.new_api()
        api.add_endpoints(ep.new_endpoint("get", "/owners/{id}", "Get", ep.response(200, Owner, "ok")))
        assert "Owner" in api.definitions
        assert api.endpoints[0].responses["200"].schema == {"$ref": "#/definitions/Owner"}

    def test_walk(self):
        """Walk visits every endpoint with its path."""
        api = swag.new_api(swag.endpoints(*_pet_endpoints()))
        seen = []
        api.walk(lambda path, endpoint: seen.append((path, endpoint.method)))
        assert seen == [("/pets/{id}", "GET"), ("/pets", "POST")]

    def test_duplicate_operation_keeps_last(self):
        """The same method and path twice keeps the last one."""
        api = API()
        api.add_endpoints(
            ep.new_endpoint("get", "/pets", "First"),
            ep.new_endpoint("get", "/pets", "Second"),
        )
        assert api.paths()["/pets"]["get"]["summary"] == "Second"

    def test_unknown_method_skipped(self):
        """Endpoints with an unknown method are left out of paths."""
        api = API()
        api.add_endpoints(ep.new_endpoint("fetch", "/pets", "Odd"))
        assert api.paths() == {}


class TestRemovePrivate:
    """Private fields are dropped on request."""

    def test_private_parameters_and_properties(self):
        """Names starting with '_' are removed."""
        api = swag.new_api(
            swag.endpoints(
                ep.new_endpoint("get", "/owners", "List", ep.query("_debug", "boolean"), ep.query("page", "integer"))
            )
        )
        api.definitions.define(
            "Secretive",
            {"type": "object", "properties": {"_token": {"type": "string"}, "name": {"type": "string"}}, "required": ["_token", "name"]},
        )
        api.remove_private()
        assert [p.name for p in api.endpoints[0].parameters] == ["page"]
        body = api.definitions.get("Secretive")
        assert list(body["properties"]) == ["name"]
        assert body["required"] == ["name"]


class TestJson:
    """JSON output."""

    def test_to_json_round_trip(self):
        """to_json serializes to_dict."""
        api = swag.new_api(swag.title("Petstore"), swag.endpoints(*_pet_endpoints()))
        assert orjson.loads(api.to_json()) == api.to_dict()
