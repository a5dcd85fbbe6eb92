from datetime import datetime


async def get_current_time() -> str:
    return datetime.now().strftime("%H:%M:%S")
