from libb import Setting

Setting.unlock()

legacy = Setting()
legacy.include_jdbc3_types=False
legacy.include_national_types=False

oldboolean = Setting()
oldboolean.boolean_type_code=-7

Setting.lock()
