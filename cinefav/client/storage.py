# cinefav/client/storage.py

import json
import logging
from pathlib import Path
from typing import Dict, Optional, Union

logger = logging.getLogger(__name__)


class LocalStorage:
    """JSON 파일 기반 key/value 저장소

    값은 문자열로만 저장되며 모든 쓰기는 즉시 디스크에 반영된다.
    """

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path).expanduser()
        self._items: Dict[str, str] = self._read()

    def _read(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            logger.error(f"로컬 저장소 읽기 실패 ({self.path}): {str(e)}")
            return {}
        if not isinstance(data, dict):
            return {}
        return {str(k): v for k, v in data.items() if isinstance(v, str)}

    def _flush(self, items: Dict[str, str]) -> None:
        """디스크 기록이 성공한 뒤에만 메모리 상태를 교체"""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self.path.with_suffix(self.path.suffix + ".tmp")
        with open(tmp_path, "w", encoding="utf-8") as f:
            json.dump(items, f, ensure_ascii=False)
        tmp_path.replace(self.path)
        self._items = items

    def get_item(self, key: str) -> Optional[str]:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._flush({**self._items, key: value})

    def remove_item(self, key: str) -> None:
        if key in self._items:
            self._flush({k: v for k, v in self._items.items() if k != key})

    def keys(self):
        return list(self._items.keys())
