"""
Human Logic expression parser using Lark
"""

from dataclasses import dataclass
from typing import List, Tuple

from lark import Lark, Token, Transformer, v_args
from lark.exceptions import UnexpectedCharacters, UnexpectedEOF, UnexpectedInput, VisitError

from humanlogic.category import Category
from humanlogic.error_msg import ExpressionSyntaxError

Position = str


@dataclass
class Expression:
    """Base class for logical expressions"""

    def to_syntax(self) -> str:
        """Convert the expression to syntax form"""
        raise NotImplementedError("Must be implemented by subclasses")


@dataclass
class ECategory(Expression):
    """Discrete category literal"""

    value: Category

    def __str__(self) -> str:
        return self.value.value

    def to_syntax(self) -> str:
        return self.value.value


@dataclass
class ENumber(Expression):
    """Fuzzy value literal"""

    value: float

    def __str__(self) -> str:
        return f"{self.value}"

    def to_syntax(self) -> str:
        return f"{self.value}"


@dataclass
class EVector(Expression):
    """Fuzzy common sense vector literal, components in UNDEF..TRUE order"""

    components: Tuple[float, ...]

    def __str__(self) -> str:
        return self.to_syntax()

    def to_syntax(self) -> str:
        return "(" + ",".join(f"{value}" for value in self.components) + ")"


@dataclass
class ECall(Expression):
    """Operator or function application"""

    position: Position
    identifier: str
    arguments: List[Expression]

    def __str__(self) -> str:
        arg_str = [str(arg) for arg in self.arguments]
        return f"{self.identifier}({arg_str})"

    def to_syntax(self) -> str:
        if self.identifier in ("and", "or") and len(self.arguments) == 2:
            left, right = self.arguments
            return f"({left.to_syntax()} {self.identifier} {right.to_syntax()})"
        if self.identifier == "not" and len(self.arguments) == 1:
            return f"not {self.arguments[0].to_syntax()}"
        arg_str = ",".join(arg.to_syntax() for arg in self.arguments)
        return f"{self.identifier}({arg_str})"


# Lark grammar for logical expressions; precedence is not > and > or
grammar = r"""
    ?start: or_expr

    ?or_expr: and_expr
            | or_expr OR and_expr -> or_op
    ?and_expr: not_expr
             | and_expr AND not_expr -> and_op
    ?not_expr: atom
             | NOT not_expr -> not_op

    ?atom: CATEGORY -> category
         | SIGNED_NUMBER -> number
         | vector
         | FUNCTION "(" or_expr ")" -> call
         | "(" or_expr ")"

    vector: "(" SIGNED_NUMBER "," SIGNED_NUMBER "," SIGNED_NUMBER "," SIGNED_NUMBER "," SIGNED_NUMBER ")"

    OR: "or" | "||" | "|"
    AND: "and" | "&&" | "&"
    NOT: "not" | "!" | "~"
    CATEGORY: "UNDEF"i | "FALSE"i | "NEVER"i | "MAYBE"i | "TRUE"i
    FUNCTION: "normalize" | "category"

    COMMENT: "//" /[^\n]*/

    %import common.SIGNED_NUMBER
    %import common.WS
    %ignore WS
    %ignore COMMENT
"""


def _position(token: Token) -> Position:
    return f"{token.line}:{token.column}"


class HumanLogicTransformer(Transformer):
    """Transform the parse tree into the AST"""

    @v_args(inline=True)
    def or_op(self, left, op, right):
        return ECall(_position(op), "or", [left, right])

    @v_args(inline=True)
    def and_op(self, left, op, right):
        return ECall(_position(op), "and", [left, right])

    @v_args(inline=True)
    def not_op(self, op, operand):
        return ECall(_position(op), "not", [operand])

    @v_args(inline=True)
    def call(self, function, argument):
        return ECall(_position(function), str(function), [argument])

    @v_args(inline=True)
    def category(self, token):
        return ECategory(Category(str(token).upper()))

    @v_args(inline=True)
    def number(self, token):
        return ENumber(float(token))

    @v_args(inline=True)
    def vector(self, *tokens):
        return EVector(tuple(float(token) for token in tokens))


# Create the parser
parser = Lark(
    grammar,
    start="start",
    parser="lalr",
    transformer=HumanLogicTransformer(),
    propagate_positions=True,
    maybe_placeholders=False,
)


def parse_expression(content: str) -> Expression:
    """
    Parse a logical expression from a string

    Args:
        content: Expression text, e.g. "TRUE and not MAYBE"

    Returns:
        The Expression AST

    Raises:
        ExpressionSyntaxError: if the text is not a well-formed expression
    """
    try:
        result = parser.parse(content)
    except UnexpectedEOF as exc:
        raise ExpressionSyntaxError("Unexpected end of expression") from exc
    except UnexpectedCharacters as exc:
        raise ExpressionSyntaxError(
            f"Unexpected character {exc.char!r}", exc.line, exc.column
        ) from exc
    except UnexpectedInput as exc:
        token = getattr(exc, "token", None)
        if token is None or token.type == "$END":
            raise ExpressionSyntaxError("Unexpected end of expression") from exc
        raise ExpressionSyntaxError(
            f"Unexpected token {str(token)!r}",
            exc.line if exc.line != -1 else None,
            exc.column if exc.column != -1 else None,
        ) from exc
    except VisitError as exc:
        raise ExpressionSyntaxError(str(exc.orig_exc)) from exc

    if not isinstance(result, Expression):
        raise ExpressionSyntaxError(f"Expected an expression, got {type(result).__name__}")

    return result
