from deltaguard.rules.loader import RulesError, load_rules, options_from_rules
from deltaguard.rules.models import Rules, SanitizerRules

__all__ = ["Rules", "RulesError", "SanitizerRules", "load_rules", "options_from_rules"]
