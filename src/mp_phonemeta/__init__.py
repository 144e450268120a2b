"""
mp_phonemeta – phone-number metadata compiler.

Import path convention::

    from mp_phonemeta.metadata import compile_territory, PhoneMetadata
    from mp_phonemeta.metadata.errors import MetadataError
    from mp_phonemeta.adapters.etree import parse_xml_string
    from mp_phonemeta.config import CompilerSettings
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
