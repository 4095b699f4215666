import json
import logging
from pathlib import Path

from tket_pass_json.compiler_pass.config import CodecConfig, get_config
from tket_pass_json.compiler_pass.entities.base_pass import BasePass
from tket_pass_json.compiler_pass.pass_codec.decoder import decode_pass
from tket_pass_json.compiler_pass.pass_codec.encoder import encode_pass
from tket_pass_json.compiler_pass.pass_codec.errors import DepthExceededError, PassDocumentError

logger = logging.getLogger(__name__)


class PassRepository:
    """Reads and writes ``compiler_pass_v1`` JSON documents."""

    def __init__(self, config: CodecConfig | None = None):
        self.config = config or get_config()

    def loads(self, text: str | bytes) -> BasePass:
        """Parse a JSON document (text or UTF-8 bytes) and decode the pass tree it holds."""
        try:
            document = json.loads(text)
        except json.JSONDecodeError as e:
            raise PassDocumentError(f"invalid JSON: {e}") from e
        except UnicodeDecodeError as e:
            raise PassDocumentError(f"document is not valid UTF-8: {e}") from e
        except RecursionError as e:
            # The parser gives up long before a bounded decoder would.
            raise DepthExceededError("document nested too deeply to parse") from e
        return decode_pass(document, self.config)

    def dumps(self, pass_: BasePass) -> str:
        """Encode a pass tree as JSON text."""
        return json.dumps(encode_pass(pass_), indent=self.config.json_indent, ensure_ascii=False)

    def load(self, path: str | Path) -> BasePass:
        """Read and decode one pass document from disk.

        Args:
            path: Path of the ``.json`` document

        Returns:
            The decoded pass tree
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Pass document not found: {path}")

        logger.debug(f"Loading pass document {path}")
        pass_ = self.loads(path.read_bytes())
        logger.info(f"Loaded {type(pass_).__name__} from {path}")
        return pass_

    def save(self, pass_: BasePass, path: str | Path) -> Path:
        """Encode a pass tree and write it to disk, creating parent directories.

        Returns:
            The path written to
        """
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(self.dumps(pass_), encoding="utf-8")
        logger.info(f"Saved {type(pass_).__name__} to {path}")
        return path
