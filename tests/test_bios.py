import pytest

from emucgb.bios import BIOS


@pytest.fixture
def image():
    return bytes(range(256))


def test_fresh_bios_is_not_loaded():
    bios = BIOS()
    assert not bios.loaded
    assert len(bios) == 0


def test_load_reads_file(tmp_path, image):
    path = tmp_path / "boot.bin"
    path.write_bytes(image)
    bios = BIOS()
    bios.load(path)
    assert bios.loaded
    assert len(bios) == len(image)
    assert [bios.read(address) for address in range(len(image))] == list(image)


def test_load_accepts_string_path(tmp_path, image):
    path = tmp_path / "boot.bin"
    path.write_bytes(image)
    bios = BIOS()
    bios.load(str(path))
    assert bios.read(0x10) == image[0x10]


def test_missing_file_raises_and_unloads(tmp_path, image):
    good = tmp_path / "boot.bin"
    good.write_bytes(image)
    bios = BIOS()
    bios.load(good)
    with pytest.raises(FileNotFoundError):
        bios.load(tmp_path / "missing.bin")
    assert not bios.loaded
    assert len(bios) == 0


def test_read_out_of_range_raises(tmp_path, image):
    path = tmp_path / "boot.bin"
    path.write_bytes(image)
    bios = BIOS()
    bios.load(path)
    with pytest.raises(IndexError):
        bios.read(len(image))
    with pytest.raises(IndexError):
        bios.read(-1)