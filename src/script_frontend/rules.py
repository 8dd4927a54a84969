"""
Script-specific post-processing rules.

After the script-invariant split, tokens pass through one rule chosen by
script. This is the place for rules such as merging honorific
abbreviations in Devanagari; every built-in rule is currently the identity.

Rules are kept in a registry:
- register(script, rule)
- @script_rule("devanagari") decorator
- get(script) falls back to the "latin" rule for unknown scripts
"""

from typing import Callable, Dict, List, Optional
import logging

from .detection import DEFAULT_SCRIPT, resolve_script

logger = logging.getLogger(__name__)

ScriptRule = Callable[[List[str]], List[str]]


def identity_rule(tokens: List[str]) -> List[str]:
    """Return tokens unchanged."""
    return tokens


class ScriptRuleRegistry:
    """
    Registry of per-script token post-processing rules.

    Lookups never fail: scripts without a rule use the default script's
    rule, and the default script always has one.
    """

    def __init__(self, default_script: str = DEFAULT_SCRIPT):
        self._rules: Dict[str, ScriptRule] = {}
        self.default_script = default_script
        self._rules[default_script] = identity_rule

    def register(self, script: str, rule: ScriptRule) -> None:
        """
        Register a rule for a script, replacing any existing one.

        Args:
            script: Script code (e.g., "devanagari")
            rule: Callable taking and returning a token list
        """
        if not callable(rule):
            raise TypeError(f"Rule for '{script}' must be callable, got {type(rule).__name__}")
        script = script.lower()
        self._rules[script] = rule
        logger.debug(f"Registered script rule: {script} -> {getattr(rule, '__name__', rule)}")

    def get(self, script: Optional[str]) -> ScriptRule:
        """Get the rule for a script, or the default script's rule."""
        if isinstance(script, str) and script.lower() in self._rules:
            return self._rules[script.lower()]
        resolved = resolve_script(script)
        return self._rules.get(resolved, self._rules[self.default_script])

    def apply(self, tokens: List[str], script: Optional[str]) -> List[str]:
        """Run the script's rule over tokens."""
        return self.get(script)(tokens)

    def list_rules(self) -> List[str]:
        """List scripts with a registered rule."""
        return sorted(self._rules.keys())

    def __contains__(self, script: str) -> bool:
        return isinstance(script, str) and script.lower() in self._rules

    def __iter__(self):
        return iter(self.list_rules())


# Global registry instance
_registry = ScriptRuleRegistry()


def register_rule(script: str, rule: ScriptRule) -> None:
    """Register a rule in the global registry."""
    _registry.register(script, rule)


def get_rule(script: Optional[str]) -> ScriptRule:
    """Get the rule for a script from the global registry."""
    return _registry.get(script)


def apply_script_rules(tokens: List[str], script: Optional[str]) -> List[str]:
    """Apply the global registry's rule for a script."""
    return _registry.apply(tokens, script)


def list_rules() -> List[str]:
    """List scripts with a registered rule."""
    return _registry.list_rules()


def script_rule(script: str) -> Callable[[ScriptRule], ScriptRule]:
    """
    Decorator to register a rule.

    Example:
        @script_rule("devanagari")
        def merge_abbreviations(tokens):
            ...
    """
    def decorator(fn: ScriptRule) -> ScriptRule:
        register_rule(script, fn)
        return fn
    return decorator


@script_rule("devanagari")
def devanagari_rule(tokens: List[str]) -> List[str]:
    # TODO: merge abbreviation + danda/dot pairs once annotators settle the list
    return tokens


@script_rule("kannada")
def kannada_rule(tokens: List[str]) -> List[str]:
    return tokens
