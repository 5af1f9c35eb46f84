import errno
import os

import pytest

from quickpick.errors import FatalError, die


def test_die_raises_with_message():
    with pytest.raises(FatalError) as info:
        die("cannot grab focus")
    assert info.value.message == "cannot grab focus"
    assert str(info.value) == "cannot grab focus"


def test_die_status_is_one():
    with pytest.raises(FatalError) as info:
        die("no fonts could be loaded.")
    assert info.value.status == 1


def test_trailing_colon_appends_error_description():
    error = OSError(errno.ENOENT, os.strerror(errno.ENOENT))
    with pytest.raises(FatalError) as info:
        die("calloc:", error)
    assert info.value.message == "calloc: " + os.strerror(errno.ENOENT)


def test_error_ignored_without_trailing_colon():
    error = OSError(errno.ENOMEM, os.strerror(errno.ENOMEM))
    with pytest.raises(FatalError) as info:
        die("cannot grab keyboard", error)
    assert info.value.message == "cannot grab keyboard"


def test_trailing_colon_without_error_is_kept():
    with pytest.raises(FatalError) as info:
        die("strdup:")
    assert info.value.message == "strdup:"


def test_custom_status():
    err = FatalError("usage", status=2)
    assert err.status == 2
    assert err.message == "usage"