"""Namespace prefixes bound on every serialized graph."""

from __future__ import annotations

from rdflib import Namespace

RDF = Namespace("http://www.w3.org/1999/02/22-rdf-syntax-ns#")
RDFS = Namespace("http://www.w3.org/2000/01/rdf-schema#")
OWL = Namespace("http://www.w3.org/2002/07/owl#")
XSD = Namespace("http://www.w3.org/2001/XMLSchema#")
BM = Namespace("http://benangmerah.net/ontology/")
PLACE = Namespace("http://benangmerah.net/place/idn/")
BPS = Namespace("http://benangmerah.net/place/idn/bps/")
GEO = Namespace("http://www.w3.org/2003/01/geo/wgs84_pos#")
QB = Namespace("http://purl.org/linked-data/cube#")
ORG = Namespace("http://www.w3.org/ns/org#")
DCT = Namespace("http://purl.org/dc/terms/")
SKOS = Namespace("http://www.w3.org/2004/02/skos/core#")

PREFIXES: dict[str, Namespace] = {
    "rdf": RDF,
    "rdfs": RDFS,
    "owl": OWL,
    "xsd": XSD,
    "bps": BPS,
    "geo": GEO,
    "qb": QB,
    "bm": BM,
    "org": ORG,
    "dct": DCT,
    "skos": SKOS,
}
