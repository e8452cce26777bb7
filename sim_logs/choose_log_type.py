from sim_logs.stdout import StdoutLogger
from sim_logs.file import FileLogger
from sim_logs.json import JSONLogger
from sim_logs.composite import CompositeLogger

def get_logger(mode="dev", log_type="server", base_path=None):
    if mode == "prod":
        return CompositeLogger(
            FileLogger(log_type=log_type, base_path=base_path),
            JSONLogger(log_type=log_type)
        )
    return StdoutLogger(log_type=log_type)
