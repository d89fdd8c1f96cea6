from pathlib import Path
from typing import Dict, List, Union

import pytest
import requests

ANDROID = 'xmlns:android="http://schemas.android.com/apk/res/android"'


class FakeResponse:
    encoding = "utf-8"

    def __init__(self, status_code: int = 200, text: str = ""):
        self.status_code = status_code
        self.text = text
        self.closed = False

    def iter_content(self, chunk_size=1):
        data = self.text.encode()
        for i in range(0, len(data), chunk_size):
            yield data[i:i + chunk_size]

    def close(self):
        self.closed = True

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()


class EndlessResponse(FakeResponse):
    """A 200 whose body never ends; reading all of it fails the test."""

    def __init__(self, status_code: int = 200):
        super().__init__(status_code)
        self.pulled = 0

    @property
    def text(self):
        raise AssertionError("whole body was read")

    @text.setter
    def text(self, value):
        pass

    def iter_content(self, chunk_size=1):
        while True:
            self.pulled += chunk_size
            if self.pulled > 1024 * 1024:
                raise AssertionError("body was not cut off")
            yield b"x" * chunk_size


class FakeSession:
    """Stands in for requests.Session: canned answers keyed by URL (or URL prefix)."""

    def __init__(self, routes: Dict[str, Union[FakeResponse, Exception]] = None, default=None):
        self.routes = routes or {}
        self.default = default if default is not None else FakeResponse(200, "{}")
        self.calls: List[str] = []
        self.closed = False

    def get(self, url, timeout=None, **kw):
        self.calls.append(url)
        hit = self.routes.get(url)
        if hit is None:
            hit = next((v for k, v in self.routes.items() if url.startswith(k)), self.default)
        if isinstance(hit, Exception):
            raise hit
        return hit

    def close(self):
        self.closed = True


def manifest_xml(body: str, app_attrs: str = "") -> str:
    return (
        f'<?xml version="1.0" encoding="utf-8"?>\n'
        f'<manifest {ANDROID} package="com.example.app">\n'
        f'  <application {app_attrs}>\n{body}\n  </application>\n'
        f'</manifest>\n'
    )


def strings_xml(entries: Dict[str, str]) -> str:
    rows = "\n".join(f'  <string name="{k}">{v}</string>' for k, v in entries.items())
    return f'<?xml version="1.0" encoding="utf-8"?>\n<resources>\n{rows}\n</resources>\n'


@pytest.fixture
def apk_dir(tmp_path: Path) -> Path:
    """Minimal jadx-style layout with every default configured path present."""
    res = tmp_path / "resources"
    (res / "res" / "values").mkdir(parents=True)
    (res / "res" / "xml").mkdir()
    (res / "res" / "raw").mkdir()
    (res / "AndroidManifest.xml").write_text(manifest_xml(
        '<activity android:name="A" android:exported="true">'
        '<intent-filter><action android:name="VIEW"/></intent-filter></activity>'
    ))
    (res / "res" / "values" / "strings.xml").write_text(strings_xml({
        "app_name": "Example",
        "firebase_database_url": "https://x.firebaseio.com",
    }))
    (res / "res" / "xml" / "network_security_config.xml").write_text("<network-security-config/>")
    (res / "res" / "raw" / "keep.xml").write_text("<resources/>")
    return tmp_path


@pytest.fixture
def conn_error():
    return requests.ConnectionError("Connection refused")
