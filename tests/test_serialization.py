import pytest

from tunequeue.serialization import (
    CBOR,
    TOML,
    CborSerializer,
    SerializationError,
    TomlSerializer,
)

SAMPLE = {"volume": 100, "shuffle": True, "repeat": "off", "queue": {"items": [1, 2, 3]}}


@pytest.mark.parametrize("serializer", [TomlSerializer(), CborSerializer()])
def test_round_trip(tmp_path, serializer):
    path = tmp_path / "state"
    returned = serializer.write(path, SAMPLE)
    assert returned == SAMPLE
    assert serializer.load(path) == SAMPLE


def test_cbor_wire_bytes(tmp_path):
    path = tmp_path / "state.cbor"
    CBOR.write(path, {"a": 1})
    assert path.read_bytes() == b"\xa1\x61\x61\x01"


def test_toml_file_is_readable_text(tmp_path):
    path = tmp_path / "config.toml"
    TOML.write(path, {"backend": "pulseaudio"})
    assert 'backend = "pulseaudio"' in path.read_text()


@pytest.mark.parametrize("serializer", [TOML, CBOR])
def test_load_missing_file_raises(tmp_path, serializer):
    path = tmp_path / "absent"
    with pytest.raises(SerializationError, match="Unable to read"):
        serializer.load(path)


def test_toml_parse_error(tmp_path):
    path = tmp_path / "bad.toml"
    path.write_text("this is = = not toml")
    with pytest.raises(SerializationError, match="Unable to parse toml"):
        TOML.load(path)


def test_cbor_parse_error(tmp_path):
    path = tmp_path / "bad.cbor"
    path.write_bytes(b"")
    with pytest.raises(SerializationError, match="Unable to parse CBOR"):
        CBOR.load(path)


def test_toml_cannot_serialize_non_table(tmp_path):
    with pytest.raises(SerializationError, match="Failed serializing value"):
        TOML.write(tmp_path / "x.toml", [1, 2, 3])


def test_cbor_write_into_missing_directory(tmp_path):
    with pytest.raises(SerializationError, match="Failed creating file"):
        CBOR.write(tmp_path / "missing" / "x.cbor", SAMPLE)


@pytest.mark.parametrize("serializer", [TOML, CBOR])
def test_default_written_when_missing(tmp_path, serializer):
    path = tmp_path / "generated"
    result = serializer.load_or_generate_default(path, lambda: SAMPLE, False)
    assert result == SAMPLE
    assert path.exists()
    assert serializer.load(path) == SAMPLE


def test_existing_file_loaded_without_default(tmp_path):
    path = tmp_path / "config.toml"
    TOML.write(path, {"volume": 5})
    calls = []

    def default():
        calls.append(True)
        return SAMPLE

    assert TOML.load_or_generate_default(path, default, True) == {"volume": 5}
    assert calls == []


def test_parse_failure_replaced_by_default(tmp_path):
    path = tmp_path / "config.toml"
    path.write_text("= broken")
    result = TOML.load_or_generate_default(path, lambda: SAMPLE, True)
    assert result == SAMPLE
    assert TOML.load(path) == SAMPLE


def test_parse_failure_raises_without_flag(tmp_path):
    path = tmp_path / "config.toml"
    path.write_text("= broken")
    with pytest.raises(SerializationError, match="^Unable to parse "):
        TOML.load_or_generate_default(path, lambda: SAMPLE, False)
    assert path.read_text() == "= broken"


def test_default_error_propagates(tmp_path):
    def default():
        raise SerializationError("no default available")

    with pytest.raises(SerializationError, match="no default available"):
        CBOR.load_or_generate_default(tmp_path / "x", default, False)