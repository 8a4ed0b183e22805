# Copyright 2025 The Runescribe Authors.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Miscellaneous file-related utilities."""

import logging
import os


def ensure_dir(dir_path: str) -> None:
  """Creates the directory (and its parents) unless it already exists."""
  if dir_path and not os.path.isdir(dir_path):
    logging.info("Creating directory %s ...", dir_path)
    os.makedirs(dir_path, exist_ok=True)


def write_file(file_path: str, content: bytes) -> None:
  """Writes binary contents to a file, creating the parent directory.

  Args:
    file_path: Fully-qualified destination path.
    content: File contents.
  """
  ensure_dir(os.path.dirname(file_path))
  logging.info("Writing %d bytes to %s ...", len(content), file_path)
  with open(file_path, mode="wb") as f:
    f.write(content)


def write_text_file(file_path: str, content: str) -> None:
  """Writes UTF-8 text to a file, creating the parent directory."""
  write_file(file_path, content.encode("utf-8"))
