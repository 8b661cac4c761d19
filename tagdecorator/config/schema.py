"""
Pydantic models for decorator configuration files

Both the YAML and the XML format are normalized to a plain mapping and
validated against these models before the registry and mapping table are
built.
"""

from typing import Optional

from pydantic import BaseModel, Field


class NamespaceConfig(BaseModel):
    """Namespace declaration as written in a configuration file"""
    letter: str = Field(min_length=1)
    url: str = Field(min_length=1)
    prefix: Optional[str] = None
    mandatory: bool = True

    class Config:
        extra = "forbid"

    def resolved_prefix(self) -> str:
        """Return the declaring attribute name, defaulting to xmlns:<letter>"""
        return self.prefix or f"xmlns:{self.letter}"


class MappingConfig(BaseModel):
    """Tag mapping rule as written in a configuration file"""
    namespace: str = ""
    name: str = Field(min_length=1)
    target_letter: Optional[str] = None
    target_name: str = Field(min_length=1)
    target_local_name: Optional[str] = None

    class Config:
        extra = "forbid"

    def resolved_local_name(self) -> str:
        """Return the target local name, defaulting to the unprefixed target name"""
        if self.target_local_name:
            return self.target_local_name
        return self.target_name.rpartition(":")[2]


class OptionsConfig(BaseModel):
    """Optional overrides for the pipeline options"""
    context_root: Optional[str] = None
    scheme_marker: Optional[str] = Field(None, min_length=1)
    dedupe_namespaces: Optional[bool] = None

    class Config:
        extra = "forbid"


class DecoratorConfig(BaseModel):
    """Complete decorator configuration document"""
    namespaces: list[NamespaceConfig] = Field(default_factory=list)
    mappings: list[MappingConfig] = Field(default_factory=list)
    options: Optional[OptionsConfig] = None

    class Config:
        extra = "forbid"
