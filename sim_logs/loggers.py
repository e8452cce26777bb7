from sim_logs.choose_log_type import get_logger
import os

env = os.getenv("ENV", "dev")

server_logger = get_logger(mode=env, log_type="server")
generation_logger = get_logger(mode=env, log_type="generation")
