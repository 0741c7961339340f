"""
Tests for ccresolve.toolchain.targets module.
"""

from ccresolve.toolchain.targets import c_targets, cxx_targets

BUILD = "x86_64-unknown-linux-gnu"


class TestCTargets:
    """Tests for the C target set."""

    def test_union_of_targets_hosts_and_build(self):
        """Test that targets, hosts and build are all included."""
        result = c_targets(
            ["arm-linux-androideabi"], ["i686-unknown-linux-gnu"], BUILD
        )

        assert set(result) == {
            "arm-linux-androideabi",
            "i686-unknown-linux-gnu",
            BUILD,
        }

    def test_overlapping_inputs_are_deduplicated(self):
        """Test that a triple listed several times appears once."""
        targets = [BUILD, "arm-linux-androideabi", "arm-linux-androideabi"]
        hosts = [BUILD, "aarch64-unknown-linux-gnu"]

        result = c_targets(targets, hosts, BUILD)

        assert len(result) == len(set(result))
        assert len(result) == len(set(targets) | set(hosts) | {BUILD})

    def test_empty_configuration_yields_build_triple(self):
        """Test that the build triple is always present."""
        assert c_targets([], [], BUILD) == [BUILD]

    def test_order_is_sorted(self):
        """Test deterministic ordering."""
        result = c_targets(["z-target", "a-target"], ["m-host"], BUILD)

        assert result == sorted(result)

    def test_no_normalization(self):
        """Test that triples differing only in spelling stay distinct."""
        result = c_targets(["armv7-linux-androideabi"], [], "arm-linux-androideabi")

        assert len(result) == 2


class TestCxxTargets:
    """Tests for the C++ target set."""

    def test_excludes_targets(self):
        """Test that only hosts and build get a C++ compiler."""
        result = cxx_targets(["aarch64-unknown-linux-gnu"], BUILD)

        assert result == sorted(["aarch64-unknown-linux-gnu", BUILD])

    def test_build_is_host(self):
        """Test that the build triple listed as host appears once."""
        assert cxx_targets([BUILD, BUILD], BUILD) == [BUILD]

    def test_empty_hosts(self):
        """Test that an empty host list yields the build triple."""
        assert cxx_targets([], BUILD) == [BUILD]
