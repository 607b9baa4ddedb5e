"""Helpers for versions, sets, errors, time, platform, files, archives and downloads."""