"""
Go Type Rendering

Prints tree-sitter Go type nodes in canonical Go expression form, matching
what go/types.ExprString produces for the same source: `*T`, `[]T`, `[N]T`,
`map[K]V`, `pkg.T`, `T[A, B]`, `func(a int) error`, `struct{a int}` and so on.
"""

from typing import Callable, Optional

from tree_sitter import Node


def node_text(node: Optional[Node]) -> str:
    """Decoded source text of a node."""
    if node is None or node.text is None:
        return ""
    return node.text.decode("utf-8", errors="replace")


def _named(node: Node) -> list[Node]:
    """Named children, comments excluded."""
    return [child for child in node.named_children if child.type != "comment"]


def _field_names(node: Node) -> list[str]:
    return [node_text(name) for name in node.children_by_field_name("name")]


def _render_identifier(node: Node) -> str:
    return node_text(node)


def _render_qualified(node: Node) -> str:
    package = node.child_by_field_name("package")
    name = node.child_by_field_name("name")
    return f"{node_text(package)}.{node_text(name)}"


def _render_pointer(node: Node) -> str:
    return "*" + render_type(_named(node)[-1])


def _render_slice(node: Node) -> str:
    return "[]" + render_type(node.child_by_field_name("element"))


def _render_array(node: Node) -> str:
    length = " ".join(node_text(node.child_by_field_name("length")).split())
    return f"[{length}]" + render_type(node.child_by_field_name("element"))


def _render_map(node: Node) -> str:
    key = render_type(node.child_by_field_name("key"))
    value = render_type(node.child_by_field_name("value"))
    return f"map[{key}]{value}"


def _render_channel(node: Node) -> str:
    value = render_type(node.child_by_field_name("value"))
    tokens = [child.type for child in node.children if not child.is_named]
    if tokens[:2] == ["<-", "chan"]:
        return f"<-chan {value}"
    if tokens[:2] == ["chan", "<-"]:
        return f"chan<- {value}"
    return f"chan {value}"


def _render_generic(node: Node) -> str:
    base = render_type(node.child_by_field_name("type"))
    arguments = node.child_by_field_name("type_arguments")
    args = [render_type(arg) for arg in _named(arguments)] if arguments else []
    return f"{base}[{', '.join(args)}]"


def _render_type_elem(node: Node) -> str:
    return " | ".join(render_type(child) for child in _named(node))


def _render_parenthesized(node: Node) -> str:
    return f"({render_type(_named(node)[0])})"


def _render_negated(node: Node) -> str:
    return "~" + render_type(_named(node)[0])


def _render_parameter(node: Node) -> tuple[str, int]:
    """Render one parameter declaration; returns (text, field count)."""
    names = _field_names(node)
    type_text = render_type(node.child_by_field_name("type"))
    if node.type == "variadic_parameter_declaration":
        type_text = "..." + type_text
    if names:
        return f"{', '.join(names)} {type_text}", len(names)
    return type_text, 1


def _render_parameter_list(node: Optional[Node]) -> tuple[str, int, bool]:
    """Returns (joined params, field count, any named)."""
    if node is None:
        return "", 0, False
    rendered = []
    count = 0
    named = False
    for param in _named(node):
        text, n = _render_parameter(param)
        rendered.append(text)
        count += n
        named = named or bool(param.children_by_field_name("name"))
    return ", ".join(rendered), count, named


def _render_signature(node: Node) -> str:
    """`(params) results` for function types and interface methods."""
    params, _, _ = _render_parameter_list(node.child_by_field_name("parameters"))
    signature = f"({params})"

    result = node.child_by_field_name("result")
    if result is None:
        return signature
    if result.type != "parameter_list":
        return f"{signature} {render_type(result)}"

    results, count, named = _render_parameter_list(result)
    if count == 0:
        return signature
    if count == 1 and not named:
        return f"{signature} {results}"
    return f"{signature} ({results})"


def _render_function(node: Node) -> str:
    return "func" + _render_signature(node)


def render_field_declaration(node: Node) -> str:
    """Render a struct field declaration without its tag: `a, b int` or `*T`."""
    names = _field_names(node)
    type_text = render_field_type(node)
    if names:
        return f"{', '.join(names)} {type_text}"
    return type_text


def render_field_type(node: Node) -> str:
    """
    Render the type of a field declaration.

    Embedded pointer fields (`*T`) keep the star, which tree-sitter holds as a
    separate token beside the `type` node.
    """
    type_text = render_type(node.child_by_field_name("type"))
    if not _field_names(node) and any(child.type == "*" for child in node.children):
        return "*" + type_text
    return type_text


def _render_struct(node: Node) -> str:
    body = node.child_by_field_name("body") or next(
        (child for child in node.named_children if child.type == "field_declaration_list"),
        None,
    )
    fields = []
    if body is not None:
        fields = [
            render_field_declaration(child)
            for child in body.named_children
            if child.type == "field_declaration"
        ]
    return "struct{" + "; ".join(fields) + "}"


def _render_interface(node: Node) -> str:
    elements = []
    for child in _named(node):
        if child.type in ("method_elem", "method_spec"):
            name = node_text(child.child_by_field_name("name"))
            elements.append(name + _render_signature(child))
        else:
            elements.append(render_type(child))
    return "interface{" + "; ".join(elements) + "}"


_RENDERERS: dict[str, Callable[[Node], str]] = {
    "type_identifier": _render_identifier,
    "identifier": _render_identifier,
    "field_identifier": _render_identifier,
    "package_identifier": _render_identifier,
    "qualified_type": _render_qualified,
    "pointer_type": _render_pointer,
    "slice_type": _render_slice,
    "array_type": _render_array,
    "map_type": _render_map,
    "channel_type": _render_channel,
    "generic_type": _render_generic,
    "type_elem": _render_type_elem,
    "constraint_elem": _render_type_elem,
    "parenthesized_type": _render_parenthesized,
    "negated_type": _render_negated,
    "function_type": _render_function,
    "struct_type": _render_struct,
    "interface_type": _render_interface,
}


def render_type(node: Optional[Node]) -> str:
    """
    Render a Go type node as canonical source text.

    Node kinds without a dedicated renderer fall back to their source text
    with whitespace runs collapsed to single spaces.
    """
    if node is None:
        return ""
    renderer = _RENDERERS.get(node.type)
    if renderer is None:
        return " ".join(node_text(node).split())
    return renderer(node)
