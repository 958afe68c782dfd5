import json
from datetime import datetime, timezone
from typing import Dict, Any, List, Optional
from app.config import settings
from pathlib import Path


class AuditLogger:
    """Logger for saving student mutations to a JSONL file."""
    
    def __init__(self, log_dir: str = None, enabled: bool = None):
        self.log_dir = Path(log_dir or settings.log_dir)
        self.enabled = settings.audit_log_enabled if enabled is None else enabled
        self.log_file = self.log_dir / "audit.jsonl"
    
    def log_event(
        self,
        event: str,
        student_id: str,
        student: Optional[Dict[str, Any]] = None,
        metadata: Dict[str, Any] = None
    ):
        """Append a mutation event to the JSONL file."""
        if not self.enabled:
            return
        
        log_entry = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "event": event,
            "student_id": student_id,
            "student": student or {},
            "metadata": metadata or {}
        }
        
        self.log_dir.mkdir(parents=True, exist_ok=True)
        with open(self.log_file, "a", encoding="utf-8") as f:
            f.write(json.dumps(log_entry, ensure_ascii=False) + "\n")
    
    def get_events(
        self,
        student_id: str = None,
        event: str = None,
        limit: int = None
    ) -> List[Dict[str, Any]]:
        """Retrieve logged events, optionally filtered."""
        if not self.log_file.exists():
            return []
        
        events = []
        with open(self.log_file, "r", encoding="utf-8") as f:
            for line in f:
                if not line.strip():
                    continue
                try:
                    entry = json.loads(line)
                except json.JSONDecodeError:
                    continue
                if student_id and entry.get("student_id") != student_id:
                    continue
                if event and entry.get("event") != event:
                    continue
                events.append(entry)
        
        # Newest first, file order breaks timestamp ties
        events.reverse()
        events.sort(key=lambda x: x.get("timestamp", ""), reverse=True)
        
        if limit:
            events = events[:limit]
        
        return events


# Global audit logger instance
audit_logger = AuditLogger()


def get_audit_logger() -> AuditLogger:
    return audit_logger
