import pickle

from pytest import warns

from lazylet.pyutils import Undefined, UndefinedType


def describe_undefined():
    def has_repr():
        assert repr(Undefined) == "Undefined"

    def has_str():
        assert str(Undefined) == "Undefined"

    def as_bool_is_false():
        assert bool(Undefined) is False

    def is_different_from_none():
        assert Undefined is not None
        assert Undefined != None  # noqa: E711

    def cannot_be_redefined():
        with warns(RuntimeWarning, match="Redefinition of 'Undefined'"):
            redefined_undefined = UndefinedType()
        assert redefined_undefined is Undefined

    def can_be_pickled():
        pickled_undefined = pickle.dumps(Undefined)
        unpickled_undefined = pickle.loads(pickled_undefined)
        assert unpickled_undefined is Undefined
