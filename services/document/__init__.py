# -*- coding: utf-8 -*-
"""Rationale document building and generation."""

from .schema_profiles import (
    SchemaProfile, HashAlgorithmProfile, SubjectProfile, get_schema_profile
)
from .document_builder import DocumentBuilder
from .metadata_generator import MetadataGenerator, GenerationResult

__all__ = [
    'SchemaProfile',
    'HashAlgorithmProfile',
    'SubjectProfile',
    'get_schema_profile',
    'DocumentBuilder',
    'MetadataGenerator',
    'GenerationResult',
]
