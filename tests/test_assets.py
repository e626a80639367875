"""Tests for artifact serialization, the asset registry and path lookup."""

from pathlib import Path

import orjson
import pytest

from pixeltiles.assets import (
    AssetBundle,
    AssetRegistry,
    asset_name_for,
    container_from_dict,
    container_to_dict,
    find_asset_path,
    read_artifact,
    resolve_tilemap_name,
    write_artifact,
)
from pixeltiles.codec import encode
from pixeltiles.errors import AssetNotFoundError, InvalidContainerError


class TestContainerDict:
    """Test conversion between containers and artifact entries."""

    def test_entry_fields(self) -> None:
        """Entries use the artifact's field names."""
        container = encode(bytes((1, 2, 3, 4)) * 2, 2, 1)

        entry = container_to_dict(container)

        assert entry == {
            "width": 2,
            "height": 1,
            "palette": [[1, 2, 3, 4]],
            "pixelsBase64": "AAA=",
            "bytesPerPixel": 1,
        }

    def test_round_trip(self, make_gradient) -> None:
        """A container survives conversion to and from a dict."""
        container = encode(make_gradient(20, 20), 20, 20)

        restored = container_from_dict(container_to_dict(container))

        assert restored.same_content(container)

    def test_missing_field(self) -> None:
        """Entries without required fields are rejected."""
        with pytest.raises(InvalidContainerError):
            container_from_dict({"width": 1, "height": 1, "palette": []})

    def test_bad_base64(self) -> None:
        """Non-base64 pixel data is rejected."""
        with pytest.raises(InvalidContainerError):
            container_from_dict(
                {"width": 1, "height": 1, "palette": [], "pixelsBase64": "!!"}
            )

    def test_bad_palette_entry(self) -> None:
        """Palette entries need four channels."""
        with pytest.raises(InvalidContainerError):
            container_from_dict(
                {"width": 1, "height": 1, "palette": [[1, 2, 3]], "pixelsBase64": "AA=="}
            )

    def test_bad_bytes_per_pixel(self) -> None:
        """Only one- and two-byte indices are accepted."""
        with pytest.raises(InvalidContainerError):
            container_from_dict(
                {
                    "width": 1,
                    "height": 1,
                    "palette": [[0, 0, 0, 0]],
                    "pixelsBase64": "AA==",
                    "bytesPerPixel": 4,
                }
            )


class TestArtifactFile:
    """Test reading and writing the artifact JSON."""

    def test_write_then_read(self, tmp_path: Path, make_gradient) -> None:
        """Both sections survive a trip through disk."""
        bundle = AssetBundle(
            tilemaps={"sheet": encode(make_gradient(17, 17), 17, 17)},
            images={"logo": encode(bytes(4), 1, 1)},
        )
        path = tmp_path / "out" / "data.json"

        write_artifact(bundle, path)
        loaded = read_artifact(path)

        assert list(loaded.tilemaps) == ["sheet"]
        assert list(loaded.images) == ["logo"]
        assert loaded.tilemaps["sheet"].same_content(bundle.tilemaps["sheet"])
        assert loaded.tilemaps["sheet"].index_width == 2

    def test_missing_file(self, tmp_path: Path) -> None:
        """Reading a missing artifact raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            read_artifact(tmp_path / "missing.json")

    def test_invalid_json(self, tmp_path: Path) -> None:
        """Unparseable artifacts are reported as invalid."""
        path = tmp_path / "data.json"
        path.write_text("{not json", encoding="utf-8")

        with pytest.raises(InvalidContainerError):
            read_artifact(path)

    def test_section_must_be_object(self, tmp_path: Path) -> None:
        """Each section maps names to entries."""
        path = tmp_path / "data.json"
        path.write_bytes(orjson.dumps({"tilemaps": []}))

        with pytest.raises(InvalidContainerError):
            read_artifact(path)

    def test_unknown_section(self) -> None:
        """Only tilemaps and images exist."""
        with pytest.raises(ValueError):
            AssetBundle().section("sounds")


class TestAssetRegistry:
    """Test name-based container lookup."""

    def test_get_registered(self) -> None:
        """Registered containers come back as the same instance."""
        container = encode(bytes(4), 1, 1)
        registry = AssetRegistry()
        registry.register("tilemap_packed", container)

        assert registry.get("tilemap_packed") is container
        assert "tilemap_packed" in registry
        assert registry.names() == ["tilemap_packed"]
        assert len(registry) == 1

    def test_unknown_name(self) -> None:
        """Unknown names raise AssetNotFoundError, which is also a KeyError."""
        registry = AssetRegistry()

        with pytest.raises(AssetNotFoundError) as exc_info:
            registry.get("nope")
        assert exc_info.value.name == "nope"
        assert "nope" in str(exc_info.value)

        with pytest.raises(KeyError):
            registry.get("nope")

    def test_from_file(self, tmp_path: Path) -> None:
        """A registry can be built over one section of an artifact."""
        path = tmp_path / "data.json"
        write_artifact(
            AssetBundle(
                tilemaps={"a": encode(bytes(4), 1, 1)},
                images={"b": encode(bytes(4), 1, 1)},
            ),
            path,
        )

        assert AssetRegistry.from_file(path).names() == ["a"]
        assert AssetRegistry.from_file(path, section="images").names() == ["b"]


class TestNames:
    """Test asset naming helpers."""

    @pytest.mark.parametrize(
        "path, name",
        [
            ("tilemap_packed.png", "tilemap_packed"),
            ("assets/tilemaps/tilemap_packed.png", "tilemap_packed"),
            ("C:\\assets\\Sheet.PNG", "Sheet"),
        ],
    )
    def test_resolve_tilemap_name(self, path: str, name: str) -> None:
        """Sheet paths map to their file stem."""
        assert resolve_tilemap_name(path) == name

    def test_resolve_rejects_non_png(self) -> None:
        """Only PNG paths name tile sheets."""
        with pytest.raises(AssetNotFoundError):
            resolve_tilemap_name("tilemap_packed.gif")

    def test_asset_name_is_plain_stem(self) -> None:
        """Artifact keys are file stems, matching name resolution for loads."""
        path = "tiles/dungeon-sheet v2.png"

        assert asset_name_for(Path(path)) == "dungeon-sheet v2"
        assert asset_name_for(Path(path)) == resolve_tilemap_name(path)


class TestFindAssetPath:
    """Test asset path resolution."""

    def test_first_existing_candidate(self, tmp_path: Path) -> None:
        """Roots are tried in order, each with and without assets/."""
        (tmp_path / "second" / "assets").mkdir(parents=True)
        target = tmp_path / "second" / "assets" / "sheet.png"
        target.write_bytes(b"")

        found = find_asset_path("sheet.png", [tmp_path / "first", tmp_path / "second"])

        assert found == target

    def test_fallback_warns(self, tmp_path: Path, caplog) -> None:
        """Nothing found logs a warning and returns the default location."""
        with caplog.at_level("WARNING", logger="pixeltiles"):
            found = find_asset_path("missing.png", [tmp_path])

        assert found.name == "missing.png"
        assert found.parent.name == "assets"
        assert "Asset not found" in caplog.text
