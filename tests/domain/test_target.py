# tests/domain/test_target.py
from domain.target import Endpoint


class TestEndpoint:
    def test_join_base_and_path(self):
        assert Endpoint(name="zen", base_url="https://api.github.com/", path="/zen").url == "https://api.github.com/zen"

    def test_path_without_slash(self):
        assert Endpoint(name="zen", base_url="https://api.github.com", path="zen").url == "https://api.github.com/zen"

    def test_absolute_path_is_kept(self):
        endpoint = Endpoint(name="other", base_url="https://api.github.com", path="https://example.com/x")
        assert endpoint.url == "https://example.com/x"

    def test_empty_path(self):
        assert Endpoint(name="root", base_url="https://api.github.com").url == "https://api.github.com"

    def test_str_is_name(self):
        assert str(Endpoint(name="zen", base_url="https://api.github.com", path="zen")) == "zen"
