from shortenerclient.dao.memory.key_value_memory_dao import KeyValueMemoryDAO


__all__ = ['KeyValueMemoryDAO']
