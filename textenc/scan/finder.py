"""AST visitor that finds text I/O calls relying on the locale encoding."""

from __future__ import annotations

import ast
from dataclasses import asdict, dataclass
from typing import Any, Dict, List, Optional, Set, Union

from ..exceptions import ScanError


@dataclass(frozen=True)
class CallRule:
    """Where a callable takes its ``mode`` and ``encoding`` arguments."""

    encoding_index: int
    mode_index: Optional[int] = None
    default_mode: str = "r"


# Keyed by the dotted name as written at the call site.
FUNCTION_RULES: Dict[str, CallRule] = {
    "open": CallRule(encoding_index=3, mode_index=1),
    "io.open": CallRule(encoding_index=3, mode_index=1),
    "io.TextIOWrapper": CallRule(encoding_index=1),
    "TextIOWrapper": CallRule(encoding_index=1),
}

# Method calls on an instance receiver (``path.read_text()``).
METHOD_RULES: Dict[str, CallRule] = {
    "read_text": CallRule(encoding_index=0),
    "write_text": CallRule(encoding_index=1),
}

# The same names called through a module or class, or imported as functions:
# the path comes first (``Path.read_text(p)``, ``textenc.read_text(path)``).
PATH_FUNCTION_RULES: Dict[str, CallRule] = {
    "read_text": CallRule(encoding_index=1),
    "write_text": CallRule(encoding_index=2),
}


@dataclass(frozen=True)
class Finding:
    path: str
    line: int
    column: int
    call: str
    message: str

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def __str__(self) -> str:
        return f"{self.path}:{self.line}:{self.column}: {self.call}(): {self.message}"


def _dotted_name(node: ast.AST) -> Optional[str]:
    if isinstance(node, ast.Name):
        return node.id
    if isinstance(node, ast.Attribute):
        parent = _dotted_name(node.value)
        return f"{parent}.{node.attr}" if parent else None
    return None


def _literal_none(node: ast.AST) -> bool:
    return isinstance(node, ast.Constant) and node.value is None


class _OmittedEncodingVisitor(ast.NodeVisitor):
    def __init__(self, filename: str) -> None:
        self.filename = filename
        self.findings: List[Finding] = []
        self.module_names: Set[str] = set()
        self.function_names: Dict[str, str] = {}

    def collect_imports(self, tree: ast.AST) -> None:
        for node in ast.walk(tree):
            if isinstance(node, ast.Import):
                for alias in node.names:
                    self.module_names.add((alias.asname or alias.name).split(".")[0])
            elif isinstance(node, ast.ImportFrom):
                for alias in node.names:
                    if alias.name in PATH_FUNCTION_RULES:
                        self.function_names[alias.asname or alias.name] = alias.name

    def _is_namespace(self, receiver: ast.AST) -> bool:
        dotted = _dotted_name(receiver)
        if dotted is None:
            return False
        parts = dotted.split(".")
        return parts[0] in self.module_names or parts[-1][:1].isupper()

    def visit_Call(self, node: ast.Call) -> None:
        name, rule = self._match(node)
        if rule is not None:
            message = self._check(node, rule)
            if message:
                self.findings.append(
                    Finding(self.filename, node.lineno, node.col_offset + 1, name, message)
                )
        self.generic_visit(node)

    def _match(self, node: ast.Call):
        name = _dotted_name(node.func)
        if name in FUNCTION_RULES:
            return name, FUNCTION_RULES[name]
        if isinstance(node.func, ast.Name) and node.func.id in self.function_names:
            return name, PATH_FUNCTION_RULES[self.function_names[node.func.id]]
        if isinstance(node.func, ast.Attribute) and node.func.attr in METHOD_RULES:
            if self._is_namespace(node.func.value):
                return name, PATH_FUNCTION_RULES[node.func.attr]
            return node.func.attr, METHOD_RULES[node.func.attr]
        return name, None

    @staticmethod
    def _check(node: ast.Call, rule: CallRule) -> Optional[str]:
        keywords = {kw.arg: kw.value for kw in node.keywords}
        if None in keywords:
            # **kwargs may carry the encoding
            return None
        if any(isinstance(arg, ast.Starred) for arg in node.args):
            return None

        if rule.mode_index is not None:
            mode_node = keywords.get("mode")
            if mode_node is None and len(node.args) > rule.mode_index:
                mode_node = node.args[rule.mode_index]
            if mode_node is None:
                mode = rule.default_mode
            elif isinstance(mode_node, ast.Constant) and isinstance(mode_node.value, str):
                mode = mode_node.value
            else:
                return None
            if "b" in mode:
                return None

        if "encoding" in keywords:
            if _literal_none(keywords["encoding"]):
                return "encoding=None falls back to the locale encoding"
            return None
        if len(node.args) > rule.encoding_index:
            if _literal_none(node.args[rule.encoding_index]):
                return "encoding=None falls back to the locale encoding"
            return None
        return "'encoding' argument not specified"


def find_omitted_encodings(source: Union[str, bytes], filename: str = "<string>") -> List[Finding]:
    """Return every call in ``source`` that leaves the text encoding implicit.

    ``source`` may be bytes, in which case the parser honours coding cookies.
    """
    try:
        tree = ast.parse(source, filename=filename)
    except SyntaxError as exc:
        raise ScanError(f"{filename}:{exc.lineno}: cannot parse: {exc.msg}") from exc

    visitor = _OmittedEncodingVisitor(filename)
    visitor.collect_imports(tree)
    visitor.visit(tree)
    return sorted(visitor.findings, key=lambda f: (f.line, f.column))


__all__ = [
    "CallRule",
    "Finding",
    "FUNCTION_RULES",
    "METHOD_RULES",
    "PATH_FUNCTION_RULES",
    "find_omitted_encodings",
]
