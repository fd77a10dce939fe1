from benangmerah_driver.rdf.namespaces import PREFIXES
from benangmerah_driver.rdf.terms import literal, to_term
from benangmerah_driver.rdf.writer import TripleWriter

__all__ = ["PREFIXES", "TripleWriter", "literal", "to_term"]
