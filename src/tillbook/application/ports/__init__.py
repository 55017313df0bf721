from tillbook.application.ports.admin_read_port import AdminReadPort

__all__ = ["AdminReadPort"]
