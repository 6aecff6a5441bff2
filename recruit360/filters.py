# filters.py
from __future__ import annotations

from dataclasses import replace
from typing import Iterable, List, Mapping, Optional, Sequence

from .geo import haversine_miles
from .models import FilterState, Program


class ProgramFilter:
    """
    Facet filtering and radius search over an in-memory program list.

    The state -> region table is passed in so the engine carries no
    lookup data of its own. Output is recomputed from scratch on every
    call; the collections involved are a few thousand rows at most.
    """

    def __init__(self, state_regions: Mapping[str, str]):
        self.state_regions = dict(state_regions)

    # ---------------- predicates ----------------

    @staticmethod
    def _passes_facets(program: Program, state: FilterState) -> bool:
        if program.division not in state.divisions:
            return False
        if state.conferences and program.conference not in state.conferences:
            return False
        if state.regions and program.region not in state.regions:
            return False
        if state.states and program.state not in state.states:
            return False
        return True

    @staticmethod
    def _matches_query(program: Program, query: str) -> bool:
        if not query:
            return True
        q = query.lower()
        return any(
            q in (value or "").lower()
            for value in (program.name, program.city, program.conference, program.state)
        )

    # ---------------- main entry point ----------------

    def apply(self, programs: Iterable[Program], state: FilterState) -> List[Program]:
        """
        Return the programs that pass every active facet.

        With a location search, results are copies annotated with
        `distance_miles` and sorted nearest first; programs without
        coordinates are dropped. Without one, input order is kept.
        """
        loc = state.location_search
        results: List[Program] = []
        distances: List[float] = []

        for program in programs:
            if not self._passes_facets(program, state):
                continue
            if not self._matches_query(program, state.search_query):
                continue

            if loc is None:
                results.append(program)
                continue

            if not program.has_coordinates:
                continue
            dist = haversine_miles(loc.lat, loc.lng, program.lat, program.lng)
            if dist > loc.radius_miles:
                continue
            results.append(replace(program, distance_miles=int(round(dist))))
            distances.append(dist)

        if loc is not None:
            order = sorted(range(len(results)), key=lambda i: distances[i])
            results = [results[i] for i in order]

        return results

    # ---------------- facet choices ----------------

    def available_conferences(self, programs: Iterable[Program], state: FilterState) -> List[str]:
        """Conferences among programs that pass the division/region/state facets."""
        facet_only = replace(state, conferences=frozenset(), search_query="", location_search=None)
        return sorted({p.conference for p in programs if p.conference and self._passes_facets(p, facet_only)})

    def available_states(self, programs: Iterable[Program], state: FilterState) -> List[str]:
        """
        States among programs in the selected divisions, limited to the
        selected regions when any are set.
        """
        found = set()
        for program in programs:
            if program.division not in state.divisions or not program.state:
                continue
            if state.regions and self.state_regions.get(program.state) not in state.regions:
                continue
            found.add(program.state)
        return sorted(found)


def find_programs(programs: Sequence[Program], ids: Iterable[str]) -> List[Program]:
    """Programs whose id is in `ids`, in collection order."""
    wanted = set(ids)
    return [p for p in programs if p.id in wanted]


def find_program(programs: Iterable[Program], program_id: str) -> Optional[Program]:
    for program in programs:
        if program.id == program_id:
            return program
    return None
