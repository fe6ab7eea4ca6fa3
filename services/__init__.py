# -*- coding: utf-8 -*-
"""
CIP-136 Rationale Wizard Service Layer

- services.wizard: step definitions, validation, collection, review
- services.validation: constraint strategies
- services.document: schema profiles, document builder, generator
"""
