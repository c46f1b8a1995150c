"""
Package marker for the news CMS service under `src`.
The HTTP API lives in `src.api`, shared settings and schema in `src.common`,
and the development data seeding in `src.seed`.
"""
