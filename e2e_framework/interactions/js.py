class JsMixin:
    """中文：JavaScript 交互混入类，提供脚本执行能力。
    English: JavaScript interaction mixin providing script execution.
    """

    def execute_js(self, script, *args):
        """中文：执行自定义 JavaScript 并返回结果。
        参数:
            script: JavaScript 脚本字符串。
            *args: 传递给脚本的参数。
        """

        self._log.debug(f"[EXECUTE_JS] {self._page_name} args={args}")
        return self.__driver.execute_script(script, *args)
