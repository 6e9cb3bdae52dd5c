from .injector import InjectionResult, Injector, inject, replace_regions, sweep_empty
from .models import InjectOptions, SourceFile, TargetDocument
from .patterns import Region, TagPattern, compile_pattern
from .sources import SourceCollection, collect_sources
from .tags import ANY, TagPair, TagRules
from .transforms import DefaultTransform, TemplateTransform

__all__ = [
    'ANY',
    'DefaultTransform',
    'InjectOptions',
    'InjectionResult',
    'Injector',
    'Region',
    'SourceCollection',
    'SourceFile',
    'TagPair',
    'TagPattern',
    'TagRules',
    'TargetDocument',
    'TemplateTransform',
    'collect_sources',
    'compile_pattern',
    'inject',
    'replace_regions',
    'sweep_empty',
]
