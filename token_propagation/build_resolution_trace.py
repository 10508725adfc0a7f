"""Step-by-step substitution of custom-property references in a value."""

from collections.abc import Mapping

from token_propagation.binding import Binding
from token_propagation.css_variables import get_css_variables, var_call


def build_resolution_trace(
    initial_value: str, bindings: Mapping[str, Binding]
) -> list[str]:
    """Return the successive values produced while resolving ``initial_value``.

    Each step replaces every ``var(--name)`` (no fallback) whose name has a
    binding with that binding's raw value. A name is expanded at most once per
    trace, so cycles terminate. References that cannot be resolved stay in the
    last step as written.
    """
    trace = [initial_value]
    visited: set[str] = set()

    while True:
        current = trace[-1]
        names = get_css_variables(current)
        if not names:
            break

        next_value = current
        changed = False
        for name in names:
            if name in visited:
                continue
            visited.add(name)

            binding = bindings.get(name)
            call = var_call(name)
            if binding is not None and binding.value and call in next_value:
                next_value = next_value.replace(call, binding.value)
                changed = True

        if not changed or next_value == current:
            break
        trace.append(next_value)

    return trace
