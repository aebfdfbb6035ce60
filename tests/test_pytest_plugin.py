from lazylet import LazyDeclaration, Namespace


def describe_lazy_fixture():
    def provides_an_attached_namespace(lazy):
        assert isinstance(lazy, Namespace)
        assert isinstance(lazy.set, LazyDeclaration)

    def provides_lazy_attributes(lazy):
        lazy.set("numbers", lambda: [1, 2, 3])
        lazy.set("total", lambda self: sum(self.numbers))
        assert lazy.total == 6

    def restores_the_context_after_each_test(pytester):
        pytester.makepyfile(
            test_restore="""
            import pytest

            contexts = []

            @pytest.fixture
            def user(lazy):
                lazy.set("name", "Alice")
                lazy.set("user", lambda self: {"name": self.name})
                contexts.append(lazy)
                return lazy

            def test_first(user):
                assert user.user == {"name": "Alice"}

            def test_second(user):
                user.name = "Bob"
                assert user.user == {"name": "Bob"}

            def test_restored():
                assert len(contexts) == 2
                for context in contexts:
                    assert not hasattr(context, "name")
                    assert not hasattr(context, "user")
                    assert context.set.names == ()
            """
        )
        result = pytester.runpytest("-p", "lazylet.pytest_plugin")
        result.assert_outcomes(passed=3)

    def provides_fresh_contexts_for_each_test(pytester):
        pytester.makepyfile(
            test_fresh="""
            contexts = []

            def test_first(lazy):
                lazy.set("value", 1)
                contexts.append(lazy)

            def test_second(lazy):
                assert lazy is not contexts[0]
                assert not hasattr(lazy, "value")
            """
        )
        result = pytester.runpytest("-p", "lazylet.pytest_plugin")
        result.assert_outcomes(passed=2)

    def uses_the_configured_method_name(pytester):
        pytester.makeini(
            """
            [pytest]
            lazylet_method = let
            """
        )
        pytester.makepyfile(
            test_let="""
            def test_let(lazy):
                lazy.let("answer", lambda: 42)
                assert lazy.answer == 42
                assert not hasattr(lazy, "set")
            """
        )
        result = pytester.runpytest("-p", "lazylet.pytest_plugin")
        result.assert_outcomes(passed=1)

    def reports_errors_of_factories(pytester):
        pytester.makepyfile(
            test_failing="""
            def test_failing(lazy):
                lazy.set("broken", lambda: 1 / 0)
                lazy.broken
            """
        )
        result = pytester.runpytest("-p", "lazylet.pytest_plugin")
        result.assert_outcomes(failed=1)
        result.stdout.fnmatch_lines(["*ZeroDivisionError*"])
