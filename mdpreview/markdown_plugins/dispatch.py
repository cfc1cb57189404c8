import logging
from typing import Optional

from markdown_it import MarkdownIt
from markdown_it.rules_block import StateBlock
from markdown_it.rules_inline import StateInline

from ..models import BLOCK, INLINE, ExtensionDefinition
from ..registry import ExtensionRegistry

logger = logging.getLogger(__name__)

TOKEN_META_KEY = "extension_token"
_PROBE_CACHE_KEY = "mdpreview_probe_cache"


def _probe_hits(state: StateInline, definition: ExtensionDefinition) -> bool:
    """Memoised ``definition.probe`` check for the current inline position.

    A probe answer computed at position ``p0`` says there is no plausible
    start in ``[p0, hit)``, so it stays valid for every later position up to
    ``hit``. The cache lives in ``env`` and therefore dies with the parse.
    """
    if definition.probe is None:
        return True

    pos = state.pos
    cache = state.env.setdefault(_PROBE_CACHE_KEY, {})
    key = (definition.name, state.src, state.posMax)
    cached = cache.get(key)
    if cached is not None:
        start, hit = cached
        if start <= pos and (hit is None or hit >= pos):
            return hit == pos

    offset = definition.probe(state.src[pos:state.posMax])
    hit = None if offset is None else pos + offset
    cache[key] = (pos, hit)
    return hit == pos


def _block_source(state: StateBlock, start_line: int, end_line: int) -> str:
    """Text of the block starting at *start_line*, as seen from the current
    container (blockquote markers and indentation stripped via bMarks/tShift).

    Stops at the first blank line and at the first line dedented out of the
    container, e.g. the next item of the list holding this block.
    """
    lines = []
    for line in range(start_line, end_line):
        if line > start_line:
            if state.isEmpty(line):
                break
            if 0 <= state.sCount[line] < state.blkIndent:
                break
        lines.append(state.src[state.bMarks[line] + state.tShift[line]:state.eMarks[line]])
    return "\n".join(lines)


def _consumed_lines(raw: str) -> int:
    lines = raw.count("\n")
    return lines if raw.endswith("\n") else lines + 1


def extensions_plugin(md: MarkdownIt, registry: ExtensionRegistry):
    """Markdown-it-py plugin that runs every extension in *registry*.

    One inline rule and one block rule are added ahead of the built-in
    rules. Each walks the registry in order, so the first registered
    extension that recognizes the text at the current position wins. Every
    extension also gets a render rule named after it.
    """

    def _extensions_inline(state: StateInline, silent: bool):
        candidates = {d.name for d in registry.inline if _probe_hits(state, d)}
        if not candidates:
            return False

        found = registry.match(
            INLINE,
            state.src[state.pos:state.posMax],
            plausible=lambda definition: definition.name in candidates,
        )
        if found is None:
            return False

        definition, ext_token = found
        if not silent:
            token = state.push(definition.name, "", 0)
            token.markup = ext_token.raw
            token.content = ext_token.raw
            token.meta = {TOKEN_META_KEY: ext_token}

        state.pos += len(ext_token.raw)
        return True

    def _extensions_block(state: StateBlock, start_line: int, end_line: int, silent: bool):
        # Indented code wins over anything else.
        if state.sCount[start_line] - state.blkIndent >= 4:
            return False

        line_start = state.bMarks[start_line] + state.tShift[start_line]
        first_line = state.src[line_start:state.eMarks[start_line]]
        candidates = {d.name for d in registry.block if d.is_plausible(first_line)}
        if not candidates:
            return False

        text = _block_source(state, start_line, end_line)
        found = registry.match(BLOCK, text, plausible=lambda definition: definition.name in candidates)
        if found is None:
            return False

        if silent:
            return True

        definition, ext_token = found
        next_line = min(start_line + _consumed_lines(ext_token.raw), end_line)

        token = state.push(definition.name, "div", 0)
        token.block = True
        token.markup = ext_token.raw
        token.content = ext_token.raw
        token.map = [start_line, next_line]
        token.meta = {TOKEN_META_KEY: ext_token}

        state.line = next_line
        return True

    def _make_render_rule(definition: ExtensionDefinition):
        def _render(self, tokens, idx, options, env):
            def render_inline(text: str) -> str:
                return md.renderInline(text, env)

            return definition.render(tokens[idx].meta[TOKEN_META_KEY], render_inline)

        return _render

    if registry.inline:
        md.inline.ruler.before("text", "extensions_inline", _extensions_inline)
    if registry.block:
        md.block.ruler.before(
            "table",
            "extensions_block",
            _extensions_block,
            {"alt": ["paragraph", "reference", "blockquote", "list"]},
        )
    for definition in registry:
        md.add_render_rule(definition.name, _make_render_rule(definition))


def install_extensions(md: Optional[MarkdownIt], registry: ExtensionRegistry) -> Optional[MarkdownIt]:
    """Install *registry* into *md*.

    A missing host parser is not fatal: it is logged and the extensions are
    simply not installed.
    """
    if md is None:
        logger.error("No markdown host parser available; custom extensions will not be applied")
        return None

    md.use(extensions_plugin, registry)
    logger.debug("Installed %d markdown extensions", len(registry))
    return md
