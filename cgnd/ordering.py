from __future__ import annotations
from typing import List, Optional, Sequence, Tuple


def sort_with_index(values: Sequence[float], descending: bool = False) -> Tuple[List[float], List[int]]:
    """
    Сортування значень разом з їхніми початковими індексами.
    Сорт у Python стабільний, тож рівні значення лишаються у вхідному порядку
    (але покладатися на це не варто).
    """
    order = sorted(range(len(values)), key=values.__getitem__, reverse=descending)
    return [values[i] for i in order], order

def is_member(left: Sequence[int], right: Sequence[int]) -> List[bool]:
    """Маска над left: чи зустрічається елемент десь у right."""
    lookup = set(right)
    return [x in lookup for x in left]

def shared_ridge(face: Sequence[int], other: Sequence[int]) -> Optional[Tuple[int, ...]]:
    """
    Спільне ребро (підгрань з d-1 вершин) двох граней.
    Повертає вершини other (у його порядку), що є у face, якщо їх рівно d-1;
    інакше None.
    """
    mask = is_member(other, sorted(face))
    if sum(mask) != len(face) - 1:
        return None
    return tuple(v for v, m in zip(other, mask) if m)
