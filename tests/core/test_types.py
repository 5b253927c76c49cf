import copy
import pickle

from mapfold.core.exceptions import EmptyInputError, MapFoldError
from mapfold.core.types import MISSING, _Missing


def test_missing_is_singleton():
    assert _Missing() is MISSING


def test_missing_is_falsy_with_readable_repr():
    assert not MISSING
    assert repr(MISSING) == "MISSING"


def test_missing_survives_copy_and_pickle():
    assert copy.copy(MISSING) is MISSING
    assert copy.deepcopy(MISSING) is MISSING
    assert pickle.loads(pickle.dumps(MISSING)) is MISSING


def test_missing_differs_from_falsy_values():
    for value in (None, 0, False, "", [], ()):
        assert value is not MISSING


def test_empty_input_error_hierarchy():
    err = EmptyInputError()
    assert isinstance(err, MapFoldError)
    assert isinstance(err, TypeError)
    assert "empty sequence" in str(err)
