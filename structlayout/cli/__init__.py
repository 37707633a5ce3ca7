"""Command line interface of struct layout optimizer (`structlayout-optimize`)."""
