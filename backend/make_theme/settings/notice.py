# make_theme/settings/notice.py
from dataclasses import dataclass, field
from typing import Dict, List, Optional

NOTICE_TYPES = ("success", "info", "warning", "error")


@dataclass
class AdminNotice:
    id: str
    message: str
    cap: str = "switch_themes"
    dismiss: bool = True
    screen: List[str] = field(default_factory=lambda: ["dashboard"])
    type: str = "info"

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "message": self.message,
            "cap": self.cap,
            "dismiss": self.dismiss,
            "screen": list(self.screen),
            "type": self.type,
        }


class NoticeRegistry:
    def __init__(self, context):
        self.context = context
        self.notices: Dict[str, AdminNotice] = {}

    def load(self):
        self.context.hooks.do_action("make_notice_loaded", self)

    def register_admin_notice(self, notice_id: str, message: str, args: Optional[dict] = None) -> bool:
        args = dict(args or {})
        if args.get("type") not in NOTICE_TYPES:
            args["type"] = "info"
        self.notices[notice_id] = AdminNotice(id=notice_id, message=message, **args)
        return True

    def get_notices(self, screen: Optional[str] = None, user=None) -> List[AdminNotice]:
        notices = list(self.notices.values())
        if screen is not None:
            notices = [n for n in notices if screen in n.screen]
        if user is not None:
            notices = [n for n in notices if user.can(n.cap)]
        return notices
