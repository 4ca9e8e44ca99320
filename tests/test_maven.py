import pytest

from nrclaunch.maven import InvalidVersionProfileError, get_maven_artifact_path


def test_regular_artifact():
    assert (
        get_maven_artifact_path("net.fabricmc:fabric-loader:0.14.21")
        == "net/fabricmc/fabric-loader/0.14.21/fabric-loader-0.14.21.jar"
    )


def test_custom_artifact_keeps_segments():
    assert get_maven_artifact_path("CUSTOM:mods:thing.jar") == "CUSTOM/mods/thing.jar"


def test_path_ends_with_name_and_version():
    path = get_maven_artifact_path("a.b.c:lib:1.0")
    assert path.startswith("a/b/c/lib/1.0/")
    assert path.endswith("lib-1.0.jar")


@pytest.mark.parametrize("bad", ["only-one", "two:parts", "a:b:c:d", ""])
def test_invalid_artifact_raises(bad):
    with pytest.raises(InvalidVersionProfileError, match="Invalid artifact name"):
        get_maven_artifact_path(bad)