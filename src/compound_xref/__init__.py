"""compound_xref: UniChem cross-references for DGIdb interaction records."""

__version__ = "0.1.0"
