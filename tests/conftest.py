import sys
from dataclasses import dataclass
from pathlib import Path

import pytest

# Add src to sys.path so we can import core/adapters/cli without installing
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

from core.config import AppSettings  # noqa: E402
from core.domain.style import ValidationState  # noqa: E402


@dataclass
class StubMetadata:
    """In-memory FieldMetadataProvider with the same answer for every field."""

    required: bool = False
    read_only: bool = False
    state: ValidationState = ValidationState.NONE
    display_name: str = "Name"
    email: bool = False
    value: str | None = None
    error: str | None = None

    def is_field_required(self, field_id):
        return self.required

    def is_field_read_only(self, field_id):
        return self.read_only

    def get_validation_state(self, field_id):
        return self.state

    def get_display_name(self, field_id):
        return self.display_name

    def is_email_field(self, field_id):
        return self.email

    def get_value(self, field_id):
        return self.value

    def get_error_message(self, field_id):
        return self.error


@pytest.fixture
def settings():
    """Settings isolated from any .env file on the machine."""
    return AppSettings(_env_file=None)


@pytest.fixture
def stub_metadata():
    """Factory for StubMetadata providers."""
    return StubMetadata


@pytest.fixture
def page_url():
    """Page URL function that records every page it was asked for."""

    calls = []

    def _url(page):
        calls.append(page)
        return f"?page={page}"

    _url.calls = calls
    return _url
