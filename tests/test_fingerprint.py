import pytest

from tmsu.fingerprint import create

SMALL = 2 * 1024 * 1024
LARGE = 6 * 1024 * 1024


def _make_file(path, size):
    with open(path, "wb") as handle:
        handle.truncate(size - 1)
        handle.seek(size - 1)
        handle.write(b"!")
    return str(path)


@pytest.fixture
def small_file(tmp_path):
    return _make_file(tmp_path / "small", SMALL)


@pytest.fixture
def large_file(tmp_path):
    return _make_file(tmp_path / "large", LARGE)


CASES = [
    ("", "cdf701ac9e4258a8efec453930c73d698d12d7e83c38a049a1f1a64375fbf776",
     "0a9f9c7cd5939b04ad4bb7d14f801fe671c1b622d0e3b7769798b14dbdbf07f1"),
    ("MD5", "a758071b3c2fe43c9a9b91db5077cd12", "40cb0a2f629169e30c2ef707255b33d5"),
    ("SHA1", "09bc65c6f6588b802177632a81b3afbe3358b7f3",
     "6dfb0884a5f2738700b9beb5473f3dd9c9fd2762"),
    ("SHA256", "cdf701ac9e4258a8efec453930c73d698d12d7e83c38a049a1f1a64375fbf776",
     "a4bd6407e40326c126f10412e245e4491c511636dbeddc3d2b16b41700017bc9"),
    ("BLAKE2b", "76b01099c5121e2436f3cb201f3917e4f46eae7dac8ac0c941b1729101e91de4",
     "fdc4dc9cebbd6f162b3dad4d196646df430dbae8c547df01447285da55247087"),
    ("dynamic:MD5", "a758071b3c2fe43c9a9b91db5077cd12", "668a4b622482b9fd30b1ad0eac4ab8f1"),
    ("dynamic:SHA1", "09bc65c6f6588b802177632a81b3afbe3358b7f3",
     "30af88de9e731520fbcb4ec5f7276af8e06eb61b"),
    ("dynamic:SHA256", "cdf701ac9e4258a8efec453930c73d698d12d7e83c38a049a1f1a64375fbf776",
     "0a9f9c7cd5939b04ad4bb7d14f801fe671c1b622d0e3b7769798b14dbdbf07f1"),
    ("dynamic:BLAKE2b", "76b01099c5121e2436f3cb201f3917e4f46eae7dac8ac0c941b1729101e91de4",
     "137c5b1e9e8107c176de7fb7a38f7670bb31364fadb2b5b883737c8732c78327"),
    ("none", "", ""),
]


@pytest.mark.parametrize("algorithm, small_expected, large_expected", CASES)
def test_file_fingerprints(small_file, large_file, algorithm, small_expected, large_expected):
    assert create(small_file, algorithm, "none", "none") == small_expected
    assert create(large_file, algorithm, "none", "none") == large_expected


def test_unsupported_file_algorithm(small_file):
    with pytest.raises(ValueError, match="unsupported file fingerprint algorithm"):
        create(small_file, "CRC32", "none", "none")


def test_missing_path(tmp_path):
    with pytest.raises(FileNotFoundError):
        create(str(tmp_path / "missing"), "", "", "")


def test_directory_none(tmp_path):
    assert create(str(tmp_path), "", "none", "none") == ""


def test_directory_sum_sizes(tmp_path):
    (tmp_path / "a").write_bytes(b"x" * 255)
    sub = tmp_path / "sub"
    sub.mkdir()
    (sub / "b").write_bytes(b"y")
    assert create(str(tmp_path), "", "sumSizes", "none") == "100"
    assert create(str(tmp_path), "", "", "none") == "100"
    assert create(str(tmp_path), "", "dynamic:sumSizes", "none") == "100"


def test_empty_directory_sum_sizes(tmp_path):
    assert create(str(tmp_path), "", "sumSizes", "none") == "0"


def test_unsupported_directory_algorithm(tmp_path):
    with pytest.raises(ValueError, match="unsupported directory fingerprint algorithm"):
        create(str(tmp_path), "", "bogus", "none")


def test_symlink_target_name(tmp_path):
    target = tmp_path / "report.tar.gz"
    target.write_text("data")
    link = tmp_path / "link"
    link.symlink_to(target)
    assert create(str(link), "", "", "targetName") == "report.tar.gz"
    assert create(str(link), "", "", "targetNameNoExt") == "report"
    assert create(str(link), "", "", "none") == ""


def test_symlink_follow(tmp_path, small_file):
    link = tmp_path / "link"
    link.symlink_to(small_file)
    assert create(str(link), "MD5", "none", "follow") == "a758071b3c2fe43c9a9b91db5077cd12"


def test_unsupported_symlink_algorithm(tmp_path, small_file):
    link = tmp_path / "link"
    link.symlink_to(small_file)
    with pytest.raises(ValueError, match="unsupported symbolic link fingerprint algorithm"):
        create(str(link), "", "", "bogus")