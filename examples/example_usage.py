"""Ví dụ: dùng service layer (không qua Flask).

Mục tiêu: minh hoạ tầng nghiệp vụ - tính chu kỳ thanh toán, báo giá học phí theo
phương pháp tính đang bật và kiểm tra lịch học hôm nay.
"""

import importlib
from datetime import date

from config import get_settings_module

from src.tuition_center.tuition_center.container import build_container


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=settings.DB_CONFIG, day_names=settings.DAY_NAMES)

    window = container.billing_service.billing_window(date.today(), "session-8")
    print("Chu kỳ 8 buổi:", window.start_date, "->", window.end_date)
    print(container.billing_service.quote(200000, "session-8"))
    print("Lớp '2, 4, 6' học hôm nay:", container.schedule_matcher.is_scheduled_today("2, 4, 6"))


if __name__ == "__main__":
    main()
