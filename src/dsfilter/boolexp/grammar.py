"""
Boolexp Grammar - Lark EBNF grammar for constraint expressions.

Expressions combine literals, variables and function calls with
comparison and boolean operators:

    os.family == 'linux' and not (host.architecture == "arm")
    validate_version(%{[agent.version]}, '>=7.0.0') || os.platform != 'debian'

Precedence, lowest first: or, and, not, comparison.
"""

BOOLEXP_GRAMMAR = r'''
?start: or_expr

?or_expr: and_expr
        | or_expr _OR and_expr          -> or_op

?and_expr: not_expr
         | and_expr _AND not_expr       -> and_op

?not_expr: comparison
         | _NOT not_expr                -> not_op

?comparison: operand
           | operand COMPARATOR operand -> compare

?operand: STRING                        -> string
        | NUMBER                        -> number
        | TRUE                          -> true_val
        | FALSE                         -> false_val
        | call
        | variable
        | "(" or_expr ")"

call: NAME "(" [argument_list] ")"

argument_list: or_expr ("," or_expr)*

variable: NAME ("." NAME)*
        | "%{[" VARPATH "]}"

// Keywords outrank NAME where both are allowed
_OR.2: /or\b/i | "||"
_AND.2: /and\b/i | "&&"
_NOT.2: /not\b/i | "!"
TRUE.2: /true\b/i
FALSE.2: /false\b/i

COMPARATOR: "==" | "!=" | "<=" | ">=" | "<" | ">"

NAME: /[a-zA-Z_][a-zA-Z0-9_]*/
VARPATH: /[a-zA-Z_][a-zA-Z0-9_.]*/
NUMBER: /-?[0-9]+(\.[0-9]+)?/
STRING: /"[^"]*"/ | /'[^']*'/

%import common.WS
%ignore WS
'''


def get_grammar() -> str:
    """Return the boolexp grammar string for use with Lark."""
    return BOOLEXP_GRAMMAR
