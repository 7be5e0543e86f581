"""
法令ID コーデック本体

すべて副作用のない純粋な変換で、スレッド間で自由に共有できる。
"""
