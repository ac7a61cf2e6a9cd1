"""Display tags for projected nodes, keyed by node type.

Purely cosmetic: the tags are PrimeIcons class names understood by the tree
widget, and unknown types get an empty tag.
"""

_ICON_MAPPING = {
    "lexical_declaration": "pi pi-fw pi-file",
    "identifier": "pi pi-fw pi-tag",
    "expression_statement": "pi pi-fw pi-code",
    "call_expression": "pi pi-fw pi-phone",
    "member_expression": "pi pi-fw pi-users",
    "property_identifier": "pi pi-fw pi-list",
    "array": "pi pi-fw pi-sort",
    "statement_block": "pi pi-fw pi-folder",
    "if_statement": "pi pi-fw pi-question",
    "else_clause": "pi pi-fw pi-arrow-right",
    "return_statement": "pi pi-fw pi-reply",
    "parenthesized_expression": "pi pi-fw pi-circle",
    "jsx_element": "pi pi-fw pi-react",
    "jsx_opening_element": "pi pi-fw pi-arrow-down",
    "jsx_closing_element": "pi pi-fw pi-arrow-up",
    "jsx_self_closing_element": "pi pi-fw pi-arrow-up",
    "jsx_attribute": "pi pi-fw pi-link",
    "jsx_expression": "pi pi-fw pi-search-plus",
    "spread_element": "pi pi-fw pi-star",
    "comment": "pi pi-fw pi-comment",
    "string": "pi pi-fw pi-file-export",
    "string_fragment": "pi pi-fw pi-file-import",
    "number": "pi pi-fw pi-sort-numeric-up",
    "object": "pi pi-fw pi-folder-open",
    "pair": "pi pi-fw pi-linkedin",
}

DEFAULT_ICON = ""


def icon_for(node_type: str) -> str:
    return _ICON_MAPPING.get(node_type, DEFAULT_ICON)
