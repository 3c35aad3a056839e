from textwrap import dedent
import tempfile
import logging
import pytest
import shutil
import os


@pytest.fixture()
def logged_warnings(caplog):
    caplog.set_level(logging.DEBUG)

    def logged_warnings():
        return [
            r.msg
            for r in caplog.records
            if r.levelno == logging.WARNING and isinstance(r.msg, dict)
        ]

    return logged_warnings


@pytest.fixture(scope="session")
def a_temp_dir():
    class TempDir:
        def __enter__(self):
            self.d = tempfile.mkdtemp()
            return self.d, self.make_file

        def __exit__(self, exc_type, exc, tb):
            if hasattr(self, "d") and os.path.exists(self.d):
                shutil.rmtree(self.d)

        def make_file(self, name, contents):
            location = os.path.join(self.d, name)
            parent = os.path.dirname(location)
            if not os.path.exists(parent):
                os.makedirs(parent)

            with open(location, "w", encoding="utf-8") as fle:
                fle.write(dedent(contents))

            return location

    return TempDir
