"""Incremental construction of JSON nodes with call chaining."""

from __future__ import annotations

from typing import Any

from .jsonnode import Node

__all__ = ["Builder"]


class _Context:
    """Restricted view of a builder that only offers the calls valid next."""

    __slots__ = ("_builder",)

    def __init__(self, builder: Builder) -> None:
        self._builder = builder


class _KeyContext(_Context):
    """State right after a key: a value or a container must follow."""

    __slots__ = ()

    def value(self, value: Any) -> _DictContext:
        self._builder.value(value)
        return _DictContext(self._builder)

    def start_dict(self) -> _DictContext:
        return self._builder.start_dict()

    def start_array(self) -> _ArrayContext:
        return self._builder.start_array()


class _DictContext(_Context):
    """State inside a dict: a key or the closing of the dict must follow."""

    __slots__ = ()

    def key(self, key: str) -> _KeyContext:
        return self._builder.key(key)

    def end_dict(self) -> Builder:
        return self._builder.end_dict()


class _ArrayContext(_Context):
    """State inside an array: values, nested containers or the closing."""

    __slots__ = ()

    def value(self, value: Any) -> _ArrayContext:
        self._builder.value(value)
        return _ArrayContext(self._builder)

    def start_dict(self) -> _DictContext:
        return self._builder.start_dict()

    def start_array(self) -> _ArrayContext:
        return self._builder.start_array()

    def end_array(self) -> Builder:
        return self._builder.end_array()


class Builder:
    """Builds a single JSON node from a sequence of chained calls."""

    def __init__(self) -> None:
        self._root = Node()
        self._stack: list[Node] = []

    def start_dict(self) -> _DictContext:
        self._stack.append(Node({}))
        return _DictContext(self)

    def key(self, key: str) -> _KeyContext:
        if not isinstance(key, str):
            raise TypeError(f"dict keys must be strings, got {type(key).__name__}")
        if not self._stack:
            raise RuntimeError("Can't add key. Try StartDict")
        if self._stack[-1].is_map():
            self._stack.append(Node(key))
        return _KeyContext(self)

    def value(self, value: Any) -> Builder:
        self._compile(Node(value))
        return self

    def start_array(self) -> _ArrayContext:
        self._stack.append(Node([]))
        return _ArrayContext(self)

    def end_dict(self) -> Builder:
        if not self._stack:
            raise RuntimeError("Can't create dict")
        if not self._stack[-1].is_map():
            raise RuntimeError("Can't close dict. Dict wasn't opened")
        self._compile(self._stack.pop())
        return self

    def end_array(self) -> Builder:
        if not self._stack:
            raise RuntimeError("Can't create array")
        if not self._stack[-1].is_array():
            raise RuntimeError("Can't close array. Array wasn't opened")
        self._compile(self._stack.pop())
        return self

    def build(self) -> Node:
        if self._root.is_null():
            raise RuntimeError("Json is not created")
        if self._stack:
            raise RuntimeError("Something wrong. Try to close opened container")
        return self._root

    def _compile(self, node: Node) -> None:
        if not self._stack:
            if not self._root.is_null():
                raise RuntimeError("Json was created before")
            self._root = node
            return

        top = self._stack[-1]
        if top.is_array():
            top.as_array().append(node)
            return
        if top.is_string():
            key = self._stack.pop().as_string()
            if self._stack and self._stack[-1].is_map():
                self._stack[-1].as_map().setdefault(key, node)
            return
        raise RuntimeError("Cant create the node")