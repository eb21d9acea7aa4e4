"""Tests for the base error type."""

import pytest
from pairedscan.common import PairedScanError


class TestPairedScanError:
    """Test PairedScanError behaviour."""
    
    def test_message_and_context(self):
        error = PairedScanError("Test error", path="/runs/a_R1.fq")
        
        assert str(error) == "Test error"
        assert error.message == "Test error"
        assert error.context == {"path": "/runs/a_R1.fq"}

    def test_empty_context(self):
        assert PairedScanError("Test error").context == {}

    def test_raised_and_caught(self):
        with pytest.raises(PairedScanError, match="boom"):
            raise PairedScanError("boom")
