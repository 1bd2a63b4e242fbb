"""Tests for declaration handles and declaration tokenizing."""

from apijson.declaration import Declaration, DeclarationKind
from apijson.tokenize_declaration import tokenize_declaration


def test_tokenize_declaration() -> None:
    """Verify tokens for identifiers, literals and punctuation."""
    assert tokenize_declaration("Red = 1") == ("Red", "=", "1")
    assert tokenize_declaration("Name = 'a b',") == ("Name", "=", "'a b'")
    assert tokenize_declaration('Label = "x;y";') == ("Label", "=", '"x;y"')
    assert tokenize_declaration("Solo") == ("Solo",)
    assert tokenize_declaration("") == ()


def test_trailing_token() -> None:
    """Verify that only multi-token declarations yield a trailing token."""
    assert Declaration(DeclarationKind.ENUM_MEMBER, tokens=("A", "=", "2")).trailing_token() == "2"
    assert Declaration(DeclarationKind.ENUM_MEMBER, tokens=("A",)).trailing_token() == ""
    assert Declaration(DeclarationKind.ENUM_MEMBER).trailing_token() == ""


def test_declaration_line() -> None:
    """Verify that bodies, line breaks and trailing semicolons are dropped."""
    decl = Declaration(
        DeclarationKind.METHOD,
        text="public render(\n    target: Element\n): void {\n  return;\n}",
    )
    assert decl.declaration_line() == "public render( target: Element ): void"
    assert Declaration(DeclarationKind.METHOD, text="stop(): void;").declaration_line() == (
        "stop(): void"
    )


def test_initializer_text() -> None:
    """Verify the literal value taken from a variable declaration."""
    decl = Declaration(DeclarationKind.VARIABLE, text="VERSION: string = '1.0';")
    assert decl.initializer_text() == "'1.0'"
    assert Declaration(DeclarationKind.VARIABLE, text="x: number").initializer_text() == ""


def test_declaration_line_keeps_inline_object_types() -> None:
    """Verify that braces of object types are not mistaken for a body."""
    decl = Declaration(
        DeclarationKind.METHOD,
        text="configure(options: { verbose: boolean }): void;",
    )
    assert decl.declaration_line() == "configure(options: { verbose: boolean }): void"

    returns_object = Declaration(
        DeclarationKind.METHOD,
        text="getOptions(): { verbose: boolean } {\n  return this._options;\n}",
    )
    assert returns_object.declaration_line() == "getOptions(): { verbose: boolean }"


def test_declaration_line_with_callback_parameters() -> None:
    """Verify signatures whose parameter and return types are function types."""
    decl = Declaration(
        DeclarationKind.METHOD,
        text=(
            "subscribe(listener: (event: { type: string }) => void): () => void {\n"
            "  return () => undefined;\n"
            "}"
        ),
    )
    assert decl.declaration_line() == (
        "subscribe(listener: (event: { type: string }) => void): () => void"
    )

    generic = Declaration(
        DeclarationKind.CLASS,
        text="class Store<T extends { id: string }> extends Base<T> {\n}",
    )
    assert generic.declaration_line() == "class Store<T extends { id: string }> extends Base<T>"


def test_initializer_text_ignores_arrows_and_comparisons() -> None:
    """Verify that only a top-level assignment starts the initializer."""
    assert Declaration(DeclarationKind.VARIABLE, text="handler: () => void").initializer_text() == ""
    assert (
        Declaration(
            DeclarationKind.VARIABLE, text="handler: (e: Event) => void = noop;"
        ).initializer_text()
        == "noop"
    )
    assert (
        Declaration(
            DeclarationKind.VARIABLE,
            text="LIMITS: Map<string, number> = new Map([['a', 1]])",
        ).initializer_text()
        == "new Map([['a', 1]])"
    )
    assert (
        Declaration(DeclarationKind.VARIABLE, text="SEP: string = '=>';").initializer_text()
        == "'=>'"
    )
