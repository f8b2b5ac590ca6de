"""Rendering support for Notion pages, transport-agnostic.

Contains:
- renderer_iface: the children-source Protocol the renderer depends on
- inline: rich-text span -> inline HTML
- renderer: block tree -> HTML fragment (+ standalone page wrapper)
- table_builder: table/table_row blocks -> <table>
- datasource: client-backed, per-render memoized children source
"""
