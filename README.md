# jsonver

Report and compare the version of the library at run time.

## Installation

```
pip install jsonver
```

## Usage

```python
from jsonver.version import version_str, version_cmp

print(version_str())            # "2.14.1"

# Negative if the library is older than 2.15.0,
# zero if it is exactly that version, positive if newer.
if version_cmp(2, 15, 0) < 0:
    print("library is older than 2.15.0")
```

`version_cmp(major, minor, micro)` compares the library's own version
with the one given, part by part. It returns the difference of the first
part that differs: the major numbers first, then the minor numbers, then
the micro numbers. The sign tells you which version is newer.

## Running the tests

```
pip install "jsonver[test]"
pytest
```