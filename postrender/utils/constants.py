APP_ORG = "RPackagesBook"
APP_NAME = "PostRender"

# Root book file produced by the asciidoc render
DEFAULT_ROOT_FILE = "_book/book-asciidoc/R-Packages--2e-.adoc"

# Lines removed from the final root file
DEFAULT_EXCLUSIONS = (
    "[appendix]",
    "include::R-CMD-check.adoc[]",
)

DEFAULT_LOG_LEVEL = "INFO"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
