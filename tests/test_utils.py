"""Tests for utils module"""

from jumplinks.utils import canonicalify, ensure_path, join_url


class TestJoinUrl:
    """Tests for join_url function"""

    def test_join_trailing_slash_base(self):
        assert join_url("/site/modules/ProcessJumplinks/", "Assets") == "/site/modules/ProcessJumplinks/Assets"

    def test_join_multiple_parts(self):
        assert join_url("/m", "Assets", "/x.css") == "/m/Assets/x.css"

    def test_join_skips_empty_parts(self):
        assert join_url("/m/", "", "x.js") == "/m/x.js"


def test_ensure_path_creates_directory(tmp_path):
    target = tmp_path / "a" / "b"

    result = ensure_path(target)

    assert result.is_dir()
    assert result == canonicalify(target)
