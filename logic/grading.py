# School grading: read student scores, write a graded report

import logging
from pathlib import Path
from typing import List

from data.exceptions import (
    GradingError,
    InvalidEncodingError,
    InvalidIdFormatError,
    InvalidScoreFormatError,
    MissingFieldError,
)

logger = logging.getLogger(__name__)

# (lowest score, grade), checked top down; anything outside 0-100 falls through to F
GRADE_BANDS = [(80, "A"), (70, "B"), (60, "C"), (50, "D")]


class Student:
    def __init__(self, id: int, full_name: str, score: int):
        self.id = id
        self.full_name = full_name
        self.score = score

    @property
    def grade(self) -> str:
        if 0 <= self.score <= 100:
            for lowest, grade in GRADE_BANDS:
                if self.score >= lowest:
                    return grade
        return "F"

    def __eq__(self, other):
        if not isinstance(other, Student):
            return NotImplemented
        return (self.id, self.full_name, self.score) == (other.id, other.full_name, other.score)

    def __repr__(self):
        return f"Student(id={self.id}, full_name='{self.full_name}', score={self.score})"


class StudentResultProcessor:
    def read_students_from_file(self, input_file_path) -> List[Student]:
        """
        Reads ``id,full name,score`` lines. Blank lines are skipped; any other
        malformed line raises a GradingError naming its line number.
        """
        students = []
        with open(input_file_path, "rb") as f:
            for line_number, raw_line in enumerate(f, start=1):
                try:
                    # utf-8-sig drops a byte order mark at the start of the file
                    line = raw_line.decode("utf-8-sig" if line_number == 1 else "utf-8")
                except UnicodeDecodeError:
                    raise InvalidEncodingError(line_number, "Line is not valid UTF-8 text.") from None
                if not line.strip():
                    continue
                parts = line.split(",")
                if len(parts) != 3:
                    raise MissingFieldError(line_number, f"Expected 3 fields, got {len(parts)}.")
                try:
                    student_id = int(parts[0].strip())
                except ValueError:
                    raise InvalidIdFormatError(line_number, "Invalid ID format.") from None
                full_name = parts[1].strip()
                try:
                    score = int(parts[2].strip())
                except ValueError:
                    raise InvalidScoreFormatError(line_number, "Score is not a valid integer.") from None
                students.append(Student(student_id, full_name, score))
        return students

    def write_report_to_file(self, students: List[Student], output_file_path):
        with open(output_file_path, "w", encoding="utf-8") as f:
            for student in students:
                f.write(f"{student.full_name} (ID: {student.id}): Score = {student.score}, Grade = {student.grade}\n")


def run_grading(input_file_path, output_file_path) -> bool:
    processor = StudentResultProcessor()
    try:
        students = processor.read_students_from_file(input_file_path)
    except FileNotFoundError:
        logger.error(f"Input file not found: {input_file_path}")
        print(f"Error: the file '{input_file_path}' was not found.")
        return False
    except GradingError as e:
        logger.error(f"{type(e).__name__} in {input_file_path}: {e}")
        print(f"Error: {e}")
        return False
    except OSError as e:
        logger.error(f"Could not read student results {input_file_path}: {e}")
        print(f"Error reading '{input_file_path}': {e}")
        return False

    try:
        processor.write_report_to_file(students, output_file_path)
    except OSError as e:
        logger.error(f"Could not write report {output_file_path}: {e}")
        print(f"Error writing '{output_file_path}': {e}")
        return False
    print(f"Report written to {Path(output_file_path)} ({len(students)} students).")
    return True


if __name__ == "__main__":
    from utils.config import GRADING_INPUT_FILE, GRADING_REPORT_FILE
    run_grading(GRADING_INPUT_FILE, GRADING_REPORT_FILE)
