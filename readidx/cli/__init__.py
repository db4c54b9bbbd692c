# Path: readidx/cli/__init__.py
"""
Command Line Tools

- readidx-import-xbrl: instance + taxonomy archive importer
- readidx-import-inline: inline XBRL report importer
"""
