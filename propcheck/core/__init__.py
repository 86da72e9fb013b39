"""
Core validation components: models, validators and the rule engine.
"""
