from hash_quality.common import TesterConfig, TrialReport, DictionaryNotFound, EmptyDictionary, HashOutOfRange
from hash_quality.hash_functions import HASH_FUNCTIONS
from hash_quality.tester import HashFunctionTester
