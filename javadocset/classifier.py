"""
Type Classifier: assigns an ElementType to a located index entry.

Javadoc markup has no single field naming an entry's kind, and the wording
changes between javadoc versions ("Static method in class ...",
"- Method in ...", class="memberNameLink" ...).  Each kind therefore gets an
ordered chain of small heuristic predicates ("evaluators"), and kinds are
tried in a fixed priority order.  The first kind whose chain matches wins.

Pipeline position: runs on every Candidate produced by the EntryLocator.
Input:  context text and class attribute of the entry's <dt>
Output: ElementType (NOT_FOUND when no chain matches)
"""

from typing import Callable

from .element_type import ElementType
from .schemas import Candidate

# A verifier answers one question about the candidate, e.g. "does the text
# contain 'class in'?".  Evaluators combine verifiers into a yes/no for a kind.
Verifier = Callable[[str], bool]
TypeEvaluator = Callable[[Verifier, Verifier], bool]


# --- Evaluators ---
# text_has() is case-insensitive; class_has_suffix() is exact-case because
# class names are case-sensitive tokens.

def is_class(text_has: Verifier, class_has_suffix: Verifier) -> bool:
    return text_has("class in") or text_has("- class") or class_has_suffix("class")


def is_static_method(text_has: Verifier, class_has_suffix: Verifier) -> bool:
    return text_has("static method in") or class_has_suffix("method")


def is_method(text_has: Verifier, class_has_suffix: Verifier) -> bool:
    return text_has("method in")


def is_static_field(text_has: Verifier, class_has_suffix: Verifier) -> bool:
    return text_has("static variable in") or text_has("field in") or class_has_suffix("field")


def is_field(text_has: Verifier, class_has_suffix: Verifier) -> bool:
    return text_has("variable in")


def is_constructor(text_has: Verifier, class_has_suffix: Verifier) -> bool:
    return text_has("constructor") or class_has_suffix("constructor")


def is_interface(text_has: Verifier, class_has_suffix: Verifier) -> bool:
    return text_has("interface in") or text_has("- interface") or class_has_suffix("interface")


def is_exception(text_has: Verifier, class_has_suffix: Verifier) -> bool:
    return text_has("exception in") or text_has("- exception") or class_has_suffix("exception")


def is_error(text_has: Verifier, class_has_suffix: Verifier) -> bool:
    return text_has("error in") or text_has("- error") or class_has_suffix("error")


def is_enum(text_has: Verifier, class_has_suffix: Verifier) -> bool:
    return text_has("enum in") or text_has("- enum") or class_has_suffix("enum")


def is_trait(text_has: Verifier, class_has_suffix: Verifier) -> bool:
    return text_has("trait in")


def is_notation(text_has: Verifier, class_has_suffix: Verifier) -> bool:
    return text_has("annotation type") or class_has_suffix("annotation")


def is_package(text_has: Verifier, class_has_suffix: Verifier) -> bool:
    return text_has("package") or class_has_suffix("package")


# --- Rule table ---

# Ambiguous text resolves to the earliest kind in this list.  Reordering it
# changes the output for real javadoc pages.
PRIORITY_ORDER = [
    ElementType.CLASS,
    ElementType.METHOD,
    ElementType.FIELD,
    ElementType.CONSTRUCTOR,
    ElementType.INTERFACE,
    ElementType.EXCEPTION,
    ElementType.ERROR,
    ElementType.ENUM,
    ElementType.TRAIT,
    ElementType.NOTATION,
    ElementType.PACKAGE,
]

EVALUATOR_CHAINS: dict[ElementType, tuple[TypeEvaluator, ...]] = {
    ElementType.CLASS: (is_class,),
    ElementType.METHOD: (is_static_method, is_method),
    ElementType.FIELD: (is_static_field, is_field),
    ElementType.CONSTRUCTOR: (is_constructor,),
    ElementType.INTERFACE: (is_interface,),
    ElementType.EXCEPTION: (is_exception,),
    ElementType.ERROR: (is_error,),
    ElementType.ENUM: (is_enum,),
    ElementType.TRAIT: (is_trait,),
    ElementType.NOTATION: (is_notation,),
    ElementType.PACKAGE: (is_package,),
}


class TypeClassifier:
    """Maps a candidate's <dt> text and class attribute to an ElementType."""

    def __init__(self, priority_order=None, evaluator_chains=None):
        self.priority_order = list(priority_order or PRIORITY_ORDER)
        self.evaluator_chains = dict(evaluator_chains or EVALUATOR_CHAINS)

    def classify(self, context_text: str, context_class: str = "") -> ElementType:
        """
        Determine the kind of an index entry.

        Args:
            context_text: Full visible text of the entry's <dt>
            context_class: The <dt>'s class attribute ("" when absent)

        Returns:
            The first ElementType (in priority order) whose evaluator chain
            matches, or ElementType.NOT_FOUND.
        """
        lowercase_text = context_text.lower()
        context_class = context_class or ""

        def text_has(substring: str) -> bool:
            return substring in lowercase_text

        def class_has_suffix(suffix: str) -> bool:
            return context_class.endswith(suffix)

        for element_type in self.priority_order:
            for evaluator in self.evaluator_chains[element_type]:
                if evaluator(text_has, class_has_suffix):
                    return element_type

        return ElementType.NOT_FOUND

    def classify_candidate(self, candidate: Candidate) -> ElementType:
        return self.classify(candidate.context_text, candidate.context_class)


def classify(context_text: str, context_class: str = "") -> ElementType:
    """Convenience function to classify with the default rule table."""
    return TypeClassifier().classify(context_text, context_class)
