"""
Visualization for the Peer-Tutoring Matchmaking System.
"""

from __future__ import annotations

import math
from typing import Dict, List, Tuple, TYPE_CHECKING

import networkx as nx
import matplotlib.pyplot as plt

from ..config import STATUS_PENDING, STATUS_ACCEPTED
from ..persistence import reconcile_state

if TYPE_CHECKING:
    from ..models.state import AppState


def build_match_graph(state: "AppState") -> nx.DiGraph:
    """
    Directed graph of active relations:
    - pending likes as single edges (status="pending")
    - mutual matches as an edge in each direction (status="accepted")
    Rejections are not drawn.
    """
    G = nx.DiGraph()
    for uid, u in state.users.items():
        G.add_node(uid, label=u.display_name)
    for r in state.relations.values():
        if r.status not in (STATUS_PENDING, STATUS_ACCEPTED):
            continue
        if r.user_id not in G or r.target_id not in G:
            continue
        G.add_edge(r.user_id, r.target_id, status=r.status, weight=float(r.match_score))
    return G


def show_match_graph(state: "AppState") -> None:
    """
    Visualize pending likes (gray arrows) and mutual matches (red).
    Edge label is the last computed match score.
    """
    reconcile_state(state)
    G = build_match_graph(state)

    if G.number_of_nodes() == 0:
        print("\n(No users to display.)")
        return
    if G.number_of_edges() == 0:
        print("\nNo pending likes or matches to display.")
        return

    pending: List[Tuple[str, str]] = []
    accepted: List[Tuple[str, str]] = []
    edge_labels: Dict[Tuple[str, str], str] = {}
    accepted_widths: List[float] = []
    seen = set()
    for u_id, v_id, data in G.edges(data=True):
        w = float(data["weight"])
        if data["status"] == STATUS_ACCEPTED:
            pair = tuple(sorted((u_id, v_id)))
            if pair in seen:
                continue
            seen.add(pair)
            accepted.append((u_id, v_id))
            accepted_widths.append(max(1.5, min(6.0, 1.5 + 4.0 * math.log1p(abs(w)))))
        else:
            pending.append((u_id, v_id))
        edge_labels[(u_id, v_id)] = f"{w:.2f}"

    pos = nx.spring_layout(G, seed=7)

    plt.figure(figsize=(9, 6))
    nx.draw_networkx_nodes(G, pos, node_color="lightblue", node_size=900)
    nx.draw_networkx_labels(G, pos, font_size=8)
    if pending:
        nx.draw_networkx_edges(G, pos, edgelist=pending, edge_color="gray", arrows=True, width=1.0)
    if accepted:
        nx.draw_networkx_edges(G, pos, edgelist=accepted, edge_color="red", arrows=False, width=accepted_widths)
    nx.draw_networkx_edge_labels(G, pos, edge_labels=edge_labels, font_size=7)
    plt.title("Pending likes (gray) and matches (red)")
    plt.axis("off")
    plt.tight_layout()
    plt.show()
