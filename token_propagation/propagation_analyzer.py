"""Per-file design token propagation analysis."""

import logging
import os

from token_propagation.binding import BindingMap
from token_propagation.build_resolution_trace import build_resolution_trace
from token_propagation.css_parser import parse_stylesheet
from token_propagation.declaration import Declaration
from token_propagation.errors import FileAnalysisError, StylesheetParseError
from token_propagation.external_vars import ExternalVarCache
from token_propagation.file_reader import FileReader, read_text_file
from token_propagation.file_result import FileResult
from token_propagation.path_utils import matches_glob, relative_to_repo
from token_propagation.propagation_config import PropagationConfig
from token_propagation.trace_analysis import (
    analyze_trace,
    classify_resolution_from_trace,
    get_resolution_sources,
    get_resolved_var_origins,
    get_unresolved_variables_from_trace,
)
from token_propagation.unresolved_var_tracker import UnresolvedVarTracker
from token_propagation.variable_collector import collect_local_bindings

logger = logging.getLogger(__name__)


class PropagationAnalyzer:
    """Resolves the tracked declarations of stylesheets against design tokens."""

    def __init__(
        self,
        config: PropagationConfig,
        tracker: UnresolvedVarTracker | None = None,
        external_cache: ExternalVarCache | None = None,
        reader: FileReader = read_text_file,
    ) -> None:
        """Initialize the analyzer with config and shared run state."""
        self.config = config
        self.reader = reader
        self.tracker = tracker or UnresolvedVarTracker(
            config.design_token_keys, config.repo_path
        )
        self.external_cache = external_cache or ExternalVarCache(reader)

    def analyze_file(self, file_path: str) -> FileResult:
        """Analyze one stylesheet.

        Raises ``FileAnalysisError`` if the file cannot be read or parsed.
        """
        file_path = os.path.abspath(file_path)
        rel_path = relative_to_repo(file_path, self.config.repo_path)

        bindings = self.collect_external_bindings(file_path)
        try:
            sheet = parse_stylesheet(self.reader(file_path), source=rel_path)
        except (OSError, UnicodeDecodeError, StylesheetParseError) as e:
            raise FileAnalysisError(rel_path, str(e)) from e

        declarations = collect_local_bindings(
            sheet,
            bindings,
            file_path,
            self.config.design_token_properties,
            display_path=rel_path,
        )
        for decl in declarations:
            self.resolve_declaration(decl, bindings, file_path)

        return FileResult(
            path=rel_path,
            absolute_path=file_path,
            declarations=declarations,
            bindings=bindings,
        )

    def collect_external_bindings(self, file_path: str) -> BindingMap:
        """Gather bindings from the external files mapped to ``file_path``.

        Later files override earlier ones for the same name. Missing or broken
        external files contribute nothing.
        """
        bindings: BindingMap = {}
        for pattern, external_paths in self.config.external_var_mapping.items():
            if not matches_glob(file_path, pattern):
                continue
            for external_rel in external_paths:
                external_abs = os.path.abspath(
                    os.path.join(self.config.repo_path, external_rel)
                )
                if external_abs == file_path:
                    logger.info("Skipping var extraction from %s", external_rel)
                    continue
                try:
                    bindings.update(self.external_cache.get(external_abs))
                except (OSError, UnicodeDecodeError, StylesheetParseError) as e:
                    logger.warning(
                        "%s could not be read, skipping... %s", external_rel, e
                    )
        return bindings

    def resolve_declaration(
        self, decl: Declaration, bindings: BindingMap, file_path: str
    ) -> None:
        """Fill in the trace-derived fields of ``decl``."""
        trace = build_resolution_trace(decl.value, bindings)
        analysis = analyze_trace(
            trace,
            decl.property,
            self.config.design_token_keys,
            self.config.excluded_values,
        )
        repo_path = self.config.repo_path

        decl.resolution_trace = trace
        decl.contains_design_token = analysis.contains_design_token
        decl.contains_excluded_value = analysis.contains_excluded_value
        decl.resolution_sources = get_resolution_sources(
            trace, bindings, file_path, repo_path
        )
        decl.unresolved_variables = get_unresolved_variables_from_trace(
            trace, bindings, self.config.design_token_keys
        )
        self.tracker.add_from_declaration(decl, file_path)
        decl.resolution_type = classify_resolution_from_trace(
            trace, bindings, file_path
        )
        decl.resolved_from = get_resolved_var_origins(trace, bindings, repo_path)
