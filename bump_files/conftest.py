import pytest

from bump_files.settings import ENV_PREFIX, BumpSettings

VERSION_GO = """\
package stream

// Version is the current release version for this client
var Version = "v1.4.2"
"""
GO_MOD = """\
module github.com/GetStream/stream-go2/v1

go 1.17
"""
README_MD = """\
# stream-go2

```
go get github.com/GetStream/stream-go2/v1
```

```go
import stream "github.com/GetStream/stream-go2/v1"
```
"""


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in BumpSettings.model_fields:
        monkeypatch.delenv(f"{ENV_PREFIX}{name.upper()}", raising=False)


@pytest.fixture()
def contents() -> dict[str, str]:
    return {
        "./version.go": VERSION_GO,
        "./go.mod": GO_MOD,
        "./README.md": README_MD,
    }
