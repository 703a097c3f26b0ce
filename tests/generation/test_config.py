from __future__ import annotations

import pytest

from codedoc.config import DEFAULT_PAGE_SIZE, GenerationRequest
from codedoc.pagination.models import PageMode


def test_request_defaults() -> None:
    request = GenerationRequest()

    assert request.page_size == DEFAULT_PAGE_SIZE == 50
    assert request.header_text == ""
    assert request.page_mode is PageMode.ALL
    assert request.custom_page_spec is None


def test_request_validates_page_size_and_custom_spec() -> None:
    with pytest.raises(ValueError, match="page_size"):
        GenerationRequest(page_size=0)

    with pytest.raises(ValueError, match="custom_page_spec"):
        GenerationRequest(page_mode=PageMode.CUSTOM)


def test_request_coerces_mode_strings() -> None:
    request = GenerationRequest(page_mode="partial")  # type: ignore[arg-type]

    assert request.page_mode is PageMode.PARTIAL


def test_request_serializes_to_plain_dict() -> None:
    request = GenerationRequest(page_size=40, header_text="Source", page_mode=PageMode.CUSTOM, custom_page_spec="1-3")

    payload = request.to_dict()

    assert payload["page_mode"] == "custom"
    assert GenerationRequest.from_dict(payload) == request


def test_request_loads_from_env() -> None:
    request = GenerationRequest.from_env(
        {
            "CODEDOC_PAGE_SIZE": "45",
            "CODEDOC_HEADER_TEXT": "Project listing",
            "CODEDOC_PAGE_MODE": "custom",
            "CODEDOC_PAGE_RANGE": "1-2,5",
        }
    )

    assert request.page_size == 45
    assert request.header_text == "Project listing"
    assert request.page_mode is PageMode.CUSTOM
    assert request.custom_page_spec == "1-2,5"


def test_env_values_are_validated() -> None:
    with pytest.raises(ValueError, match="CODEDOC_PAGE_SIZE"):
        GenerationRequest.from_env({"CODEDOC_PAGE_SIZE": "zero"})

    with pytest.raises(ValueError, match="CODEDOC_PAGE_SIZE"):
        GenerationRequest.from_env({"CODEDOC_PAGE_SIZE": "0"})

    with pytest.raises(ValueError, match="CODEDOC_PAGE_MODE"):
        GenerationRequest.from_env({"CODEDOC_PAGE_MODE": "some"})

    with pytest.raises(ValueError, match="CODEDOC_PAGE_RANGE"):
        GenerationRequest.from_env({"CODEDOC_PAGE_MODE": "custom"})


def test_explicit_values_override_env_before_validation() -> None:
    environ = {"CODEDOC_PAGE_SIZE": "abc", "CODEDOC_PAGE_MODE": "custom", "CODEDOC_HEADER_TEXT": "Env"}

    request = GenerationRequest.from_env(environ, page_size=7, page_mode="partial")

    assert request.page_size == 7
    assert request.page_mode is PageMode.PARTIAL
    assert request.header_text == "Env"
    assert request.custom_page_spec is None


def test_env_page_range_completes_explicit_custom_mode() -> None:
    request = GenerationRequest.from_env({"CODEDOC_PAGE_RANGE": "2-3"}, page_mode=PageMode.CUSTOM)

    assert request.custom_page_spec == "2-3"
    with pytest.raises(ValueError, match="CODEDOC_PAGE_RANGE"):
        GenerationRequest.from_env({}, page_mode="custom")
