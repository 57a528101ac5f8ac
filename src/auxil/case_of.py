"""
A switch-case alternative: dispatch on a value to a table of handlers.
"""

NO_DEFAULT = "ERROR no Default value set"


class CaseOf(dict):
    """
    Dict of value -> zero-argument handler, callable as `dispatch(value)`.
    The handler stored under "default" runs when no other one matches.
    """

    def __call__(self, value):
        handler = self.get(value)
        if handler is None and not isinstance(value, str):
            # Keys typed in as strings still match, e.g. "1" for 1.
            handler = self.get(str(value))
        if handler is None:
            handler = self.get("default")
        if handler is None:
            return NO_DEFAULT
        return handler()

    def register(self, k):
        def decorate(f):
            self[k] = f
            return f
        return decorate

    def default(self, f):
        self["default"] = f
        return f


def case_of(cases=None):
    """
    Build a dispatch function from a dict of handlers. Usage:

        dispatch = case_of({
            1: lambda: "one",
            "default": lambda: "something else",
        })

        dispatch(1) # 'one'
        dispatch(2) # 'something else'

    Handlers can also be added with decorators:

        @dispatch.register(2)
        def two(): return "two"

    If nothing matches and there is no "default" handler, the string
    "ERROR no Default value set" is returned.
    """
    return CaseOf(cases or {})
