from api_spec_tools.parser.identifiers import HTTP_METHODS, build_endpoint_id, method_from_id, path_id


class TestBuildEndpointId:
    def test_path_param(self):
        assert build_endpoint_id("get", "/pet/{petId}") == "GET__pet__petId"

    def test_plain_path(self):
        assert build_endpoint_id("put", "/pet") == "PUT__pet"

    def test_nested_path(self):
        assert build_endpoint_id("get", "/pet/findByStatus") == "GET__pet_findByStatus"

    def test_trailing_underscores_stripped(self):
        assert path_id("/users/{id}/") == "_users__id"
        assert build_endpoint_id("delete", "/a/{b}//") == "DELETE__a__b"

    def test_method_uppercased(self):
        assert build_endpoint_id("PaTcH", "/x") == "PATCH__x"

    def test_punctuation_collides(self):
        assert build_endpoint_id("get", "/a-b") == build_endpoint_id("get", "/a.b")

    def test_root_path(self):
        assert build_endpoint_id("get", "/") == "GET_"

    def test_deterministic(self):
        assert build_endpoint_id("post", "/store/order") == build_endpoint_id("post", "/store/order")


class TestMethodFromId:
    def test_returns_lowercase_method(self):
        assert method_from_id("GET__pet__petId") == "get"

    def test_no_underscore_is_malformed(self):
        assert method_from_id("INVALID") is None
        assert method_from_id("") is None

    def test_two_parts_is_enough(self):
        assert method_from_id("INVALID_ID") == "invalid"

    def test_every_method_round_trips(self):
        for method in HTTP_METHODS:
            assert method_from_id(build_endpoint_id(method, "/pets")) == method
