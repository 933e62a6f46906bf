"""Tests for Fragment and FragmentRequest entities."""

import pytest
from graphql import parse

from normcache.core.entities import Fragment, FragmentRequest

USER_FRAGMENT = """
fragment UserFields on User {
  id
  name
}
"""

TWO_FRAGMENTS = """
fragment UserFields on User {
  id
  name
}

fragment PostFields on Post {
  id
  title
}
"""


@pytest.fixture
def fragment() -> Fragment:
    """Create a single-definition fragment for testing."""
    return Fragment(document=parse(USER_FRAGMENT))


class TestFragment:
    """Tests for Fragment entity."""

    def test_independently_parsed_documents_are_equal(self) -> None:
        """Test that equal source parsed twice gives equal fragments."""
        a = Fragment(document=parse(TWO_FRAGMENTS), fragment_name="UserFields")
        b = Fragment(document=parse(TWO_FRAGMENTS), fragment_name="UserFields")

        assert a.document is not b.document
        assert a == b
        assert hash(a) == hash(b)

    def test_formatting_does_not_matter(self) -> None:
        """Test that documents differing only in whitespace are equal."""
        a = Fragment.from_source(USER_FRAGMENT)
        b = Fragment.from_source("fragment UserFields on User { id name }")

        assert a == b
        assert hash(a) == hash(b)

    def test_different_fragment_name(self) -> None:
        """Test that changing only the fragment name breaks equality."""
        a = Fragment.from_source(TWO_FRAGMENTS, fragment_name="UserFields")
        b = Fragment.from_source(TWO_FRAGMENTS, fragment_name="PostFields")

        assert a != b

    def test_different_document(self, fragment: Fragment) -> None:
        """Test that different selections are not equal."""
        other = Fragment.from_source("fragment UserFields on User { id }")

        assert fragment != other

    def test_not_equal_to_other_types(self, fragment: Fragment) -> None:
        """Test comparison with unrelated objects."""
        assert fragment != fragment.printed_document
        assert fragment != None  # noqa: E711

    def test_usable_as_dict_key(self) -> None:
        """Test that equal fragments address the same dict entry."""
        cache = {Fragment.from_source(USER_FRAGMENT): "cached"}

        assert cache[Fragment.from_source(USER_FRAGMENT)] == "cached"

    def test_no_eager_validation(self) -> None:
        """Test that a multi-fragment document without a name is accepted."""
        fragment = Fragment.from_source(TWO_FRAGMENTS)

        assert fragment.fragment_name is None

    def test_repr(self, fragment: Fragment) -> None:
        """Test the debug representation."""
        text = repr(fragment)

        assert text.startswith("Fragment(document=DocumentNode(")
        assert "fragment UserFields on User" in text
        assert text.endswith("fragment_name=None)")

    def test_fragment_immutable(self, fragment: Fragment) -> None:
        """Test that Fragment is immutable."""
        with pytest.raises(AttributeError):
            fragment.fragment_name = "Other"  # type: ignore

    def test_as_request(self, fragment: Fragment) -> None:
        """Test building a request from a fragment."""
        request = fragment.as_request(
            id_fields={"__typename": "User", "id": "1"},
            variables={"size": 10},
        )

        assert isinstance(request, FragmentRequest)
        assert request.fragment is fragment
        assert dict(request.id_fields) == {"__typename": "User", "id": "1"}
        assert dict(request.variables) == {"size": 10}

    def test_as_request_default_variables(self, fragment: Fragment) -> None:
        """Test that variables default to an empty mapping."""
        request = fragment.as_request(id_fields={"id": "1"})

        assert dict(request.variables) == {}


class TestFragmentRequest:
    """Tests for FragmentRequest entity."""

    def test_equal_requests(self, fragment: Fragment) -> None:
        """Test that requests with equal parts are equal."""
        a = FragmentRequest(
            fragment=fragment,
            id_fields={"__typename": "User", "id": "1"},
            variables={"a": [1, 2]},
        )
        b = FragmentRequest(
            fragment=Fragment.from_source(USER_FRAGMENT),
            id_fields={"id": "1", "__typename": "User"},
            variables={"a": [1, 2]},
        )

        assert a == b
        assert hash(a) == hash(b)

    def test_different_id_fields(self, fragment: Fragment) -> None:
        """Test that different identifying fields are not equal."""
        a = FragmentRequest(fragment=fragment, id_fields={"id": "1"})
        b = FragmentRequest(fragment=fragment, id_fields={"id": "2"})

        assert a != b

    def test_swapped_variables_and_id_fields(self, fragment: Fragment) -> None:
        """Test that variables and id fields are not interchangeable."""
        a = FragmentRequest(
            fragment=fragment, id_fields={"id": "1"}, variables={"id": "2"}
        )
        b = FragmentRequest(
            fragment=fragment, id_fields={"id": "2"}, variables={"id": "1"}
        )

        assert a != b

    def test_different_variables(self, fragment: Fragment) -> None:
        """Test that different variables are not equal."""
        a = fragment.as_request(id_fields={"id": "1"}, variables={"first": 1})
        b = fragment.as_request(id_fields={"id": "1"}, variables={"first": "1"})

        assert a != b

    def test_different_fragment(self, fragment: Fragment) -> None:
        """Test that requests for different fragments are not equal."""
        other = Fragment.from_source("fragment UserFields on User { id }")

        assert fragment.as_request(id_fields={"id": "1"}) != other.as_request(
            id_fields={"id": "1"}
        )

    def test_usable_in_set(self, fragment: Fragment) -> None:
        """Test deduplication of equal requests in a set."""
        requests = {
            fragment.as_request(id_fields={"id": "1"}),
            Fragment.from_source(USER_FRAGMENT).as_request(id_fields={"id": "1"}),
            fragment.as_request(id_fields={"id": "2"}),
        }

        assert len(requests) == 2

    def test_mappings_copied_on_construction(self, fragment: Fragment) -> None:
        """Test that later mutation of the inputs does not leak in."""
        id_fields = {"id": "1"}
        request = fragment.as_request(id_fields=id_fields)
        before = hash(request)

        id_fields["id"] = "2"

        assert request.id_fields["id"] == "1"
        assert hash(request) == before

    def test_mappings_read_only(self, fragment: Fragment) -> None:
        """Test that the stored mappings cannot be mutated."""
        request = fragment.as_request(id_fields={"id": "1"})

        with pytest.raises(TypeError):
            request.id_fields["id"] = "2"  # type: ignore

    def test_repr_omits_id_fields(self, fragment: Fragment) -> None:
        """Test that the representation shows fragment and variables only."""
        request = fragment.as_request(
            id_fields={"id": "secret-id"}, variables={"size": 10}
        )
        text = repr(request)

        assert text.startswith("FragmentRequest(fragment=Fragment(")
        assert "variables={'size': 10}" in text
        assert "secret-id" not in text
