"""
propgraph demo
Builds a small social graph, runs the one-hop queries and prints the text forms.
"""
import argparse
import json
import logging

from propgraph.bootstrap import build_graph_database, build_connection, load_config
from propgraph.builders import NodeBuilder
from propgraph.config.settings import get_settings
from propgraph.core import GraphDatabase
from propgraph.services import to_node_link_data
from propgraph.shared.error_framework import ReferentialIntegrityError
from propgraph.shared.logger import setup_logger
from propgraph.storage import NodeRecord, EdgeRecord

logger = logging.getLogger(__name__)


def build_social_graph(db: GraphDatabase) -> GraphDatabase:
    """Alice and Bob are friends and work for Acme; Carol joins through the builder"""
    alice = db.create_node(["Person"], {"name": "Alice"})
    bob = db.create_node(["Person"], {"name": "Bob"})
    acme = db.create_node(["Company"], {"name": "Acme Corp"})

    db.create_edge("FRIENDS_WITH", alice.id, bob.id, {"since": 2020})
    db.create_edge("WORKS_FOR", alice.id, acme.id, {"role": "engineer"})
    db.create_edge("WORKS_FOR", bob.id, acme.id, {"role": "designer"})

    carol = (
        NodeBuilder()
        .with_id("carol")
        .add_labels("Person", "Manager")
        .add_property("name", "Carol")
        .build()
    )
    db.add_node(carol)
    db.create_edge("MANAGES", carol.id, alice.id)
    return db


def export_records(db: GraphDatabase, config: dict) -> None:
    """Write node and edge records through the configured record store"""
    store = get_settings().store
    with build_connection(config) as conn:
        conn.create_table(store.node_table)
        conn.create_table(store.edge_table)
        for node in db.get_all_nodes():
            conn.save(store.node_table, NodeRecord.from_node(node).to_record())
        for edge in db.get_all_edges():
            conn.save(store.edge_table, EdgeRecord.from_edge(edge).to_record())
    logger.info(f"Exported {db.count_nodes()} nodes and {db.count_edges()} edges")


def main(argv=None) -> GraphDatabase:
    parser = argparse.ArgumentParser(description="propgraph demo")
    parser.add_argument("--config", default=None, help="infrastructure YAML path")
    parser.add_argument("--export", action="store_true", help="write records to the configured store")
    parser.add_argument("--node-link", action="store_true", help="print node-link JSON")
    args = parser.parse_args(argv)

    setup_logger()
    config = load_config(args.config)
    db = build_social_graph(build_graph_database(config))

    print(f"\n{'='*70}")
    print("== PROPGRAPH DEMO")
    print(f"{'='*70}")

    for node in db.get_all_nodes():
        print(f"   {node}")
    for edge in db.get_all_edges():
        print(f"   {edge}")

    alice = db.find_nodes_by_property("name", "Alice").nodes[0]
    print(f"\n[NEIGHBORS] of {alice.id}")
    print(db.get_neighbors(alice.id))

    print(f"\n[FOLLOW] {alice.id} -[WORKS_FOR]->")
    print(db.follow_edge_type(alice.id, "WORKS_FOR"))

    print(f"\n[CONNECTED] carol -> {alice.id}: {db.are_connected('carol', alice.id)}")
    print(f"[CONNECTED] {alice.id} -> carol: {db.are_connected(alice.id, 'carol')}")

    try:
        db.create_edge("KNOWS", "missing", alice.id)
    except ReferentialIntegrityError as e:
        print(f"\n[REJECTED] {e}")

    if args.node_link:
        print(json.dumps(to_node_link_data(db), ensure_ascii=False, indent=2, default=str))

    if args.export:
        export_records(db, config)

    return db


if __name__ == "__main__":
    main()
