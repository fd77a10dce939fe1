"""Accumulate emitted triples in an rdflib graph and serialize them."""

from __future__ import annotations

import logging
from collections.abc import Mapping

from rdflib import Graph, Namespace
from rdflib.plugin import PluginException, get
from rdflib.serializer import Serializer

from benangmerah_driver.events import Triple
from benangmerah_driver.exceptions import OutputFormatError
from benangmerah_driver.rdf.namespaces import PREFIXES
from benangmerah_driver.rdf.terms import to_term

logger = logging.getLogger(__name__)


class TripleWriter:
    """Collects triples and renders them in one RDF serialization format."""

    def __init__(
        self,
        prefixes: Mapping[str, Namespace | str] | None = None,
        format: str = "turtle",
    ) -> None:
        try:
            get(format, Serializer)
        except PluginException as exc:
            raise OutputFormatError(f"Unknown RDF output format: {format}") from exc
        self.format = format
        self.graph = Graph()
        for prefix, namespace in (PREFIXES if prefixes is None else prefixes).items():
            self.graph.bind(prefix, Namespace(str(namespace)), override=True)

    def add(self, triple: Triple) -> None:
        self.graph.add(
            (to_term(triple.subject), to_term(triple.predicate), to_term(triple.object))
        )

    def __len__(self) -> int:
        return len(self.graph)

    def end(self) -> str:
        data = self.graph.serialize(format=self.format)
        logger.debug("Serialized %d triples as %s", len(self.graph), self.format)
        return data
