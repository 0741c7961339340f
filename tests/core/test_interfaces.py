"""
Tests for ccresolve.core.interfaces module.
"""

import pytest

from ccresolve.core.interfaces import CommandRunner, ToolchainProber
from ccresolve.toolchain.language import Language


class StaticProber(ToolchainProber):
    def probe(self, target, host, language, static_crt=False):
        return language.traditional


class TestToolchainProber:
    """Tests for the ToolchainProber interface."""

    def test_cannot_instantiate_abstract(self):
        with pytest.raises(TypeError):
            ToolchainProber()

    def test_language_annotation(self):
        annotations = ToolchainProber.probe.__annotations__

        assert annotations["language"] == "Language"
        assert annotations["target"] is str
        assert annotations["return"] is str

    def test_subclass_probe(self):
        prober = StaticProber()

        result = prober.probe(
            "x86_64-unknown-linux-gnu", "x86_64-unknown-linux-gnu", Language.CPLUSPLUS
        )

        assert result == "c++"


class TestCommandRunner:
    """Tests for the CommandRunner interface."""

    def test_cannot_instantiate_abstract(self):
        with pytest.raises(TypeError):
            CommandRunner()
