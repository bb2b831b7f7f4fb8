"""Repository loading — turn chart repository index files into index entries.

A chart repository publishes an ``index.yaml`` listing every version of
every chart it serves. This package reads those files and feeds them into
a search index, one repository at a time.
"""
