"""Shared fixtures for core unit tests"""

import pytest


MESSY_MD = """\
# Project



Intro paragraph.
### Install
5. Download
7. Unpack
   2. check the checksum
   9. verify the signature
2. Run
```
# not a heading
1. not a list item
```
## Usage
*Last updated: 2026-01-15*
Done.



"""

CLEAN_MD = """\
# Project

Intro paragraph.

## Install

1. Download
2. Unpack
   1. check the checksum
   2. verify the signature
3. Run

```text
# not a heading
1. not a list item
```

## Usage

### Last updated: 2026-01-15

Done.
"""


@pytest.fixture(name="messy_md")
def messy_md_fixture():
    return MESSY_MD


@pytest.fixture(name="clean_md")
def clean_md_fixture():
    return CLEAN_MD
